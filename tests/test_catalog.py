"""Tests for the infrastructure and template catalogs."""
import pytest
from app.core.errors import InvalidInfrastructureId
from app.generators.app_gen.catalog import (
    find_template,
    load_infrastructure_catalog,
    load_templates,
)
from app.generators.app_gen.types import InfrastructureSelection


def test_catalog_ids():
    catalog = load_infrastructure_catalog()
    assert catalog.ids("database") == ["fireproof", "orbitdb", "gunjs", "ceramic", "planetscale", "upstash"]
    assert catalog.ids("rpc") == ["alchemy", "quicknode", "chainbase", "base-public"]
    assert catalog.ids("storage") == ["ipfs", "arweave", "filecoin", "supabase-storage"]
    assert catalog.ids("paymaster") == ["coinbase-paymaster", "pimlico", "alchemy-aa"]


def test_validate_accepts_known_ids_and_missing_paymaster():
    catalog = load_infrastructure_catalog()
    catalog.validate(InfrastructureSelection(database="upstash", storage="arweave", rpc="base-public"))
    catalog.validate(InfrastructureSelection(
        database="fireproof", storage="ipfs", rpc="alchemy", paymaster="alchemy-aa",
    ))


@pytest.mark.parametrize("selection, category, value", [
    (InfrastructureSelection(database="mysql", storage="ipfs", rpc="alchemy"), "database", "mysql"),
    (InfrastructureSelection(database="fireproof", storage="s3", rpc="alchemy"), "storage", "s3"),
    (InfrastructureSelection(database="fireproof", storage="ipfs", rpc="infura"), "rpc", "infura"),
    (InfrastructureSelection(database="fireproof", storage="ipfs", rpc="alchemy", paymaster="biconomy"), "paymaster", "biconomy"),
])
def test_validate_rejects_unknown_ids(selection, category, value):
    with pytest.raises(InvalidInfrastructureId) as exc_info:
        load_infrastructure_catalog().validate(selection)
    assert exc_info.value.category == category
    assert exc_info.value.value == value


def test_recommended_stack_falls_back_to_default():
    catalog = load_infrastructure_catalog()
    assert catalog.recommended_stack("gaming").database == "gunjs"
    default = catalog.recommended_stack("unheard-of")
    assert default == InfrastructureSelection(
        database="fireproof", storage="ipfs", rpc="alchemy", paymaster="coinbase-paymaster",
    )


def test_templates():
    templates = load_templates()
    assert len(templates) == 15
    assert find_template("nft-marketplace")["category"] == "crypto"
    assert find_template("missing") is None
    assert find_template("x", templates=[{"id": "x", "title": "X"}]) == {"id": "x", "title": "X"}
