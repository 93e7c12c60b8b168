"""Tests for the generate_app command-line script."""
import importlib.util
from pathlib import Path
import pytest
from app.generators.app_gen.types import InfrastructureSelection


def _load_script():
    script_path = Path(__file__).parent.parent / "scripts" / "generate_app.py"
    spec = importlib.util.spec_from_file_location("generate_app_script", script_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _infrastructure(argv):
    script = _load_script()
    parser = script.build_parser()
    return script.parse_infrastructure(parser, parser.parse_args(argv))


def test_no_infra_flags_means_no_selection():
    assert _infrastructure(["Create a recipe app"]) is None


def test_database_fills_in_defaults():
    assert _infrastructure(["Create a recipe app", "--database", "fireproof"]) == InfrastructureSelection(
        database="fireproof", storage="ipfs", rpc="base-public", paymaster=None,
    )


def test_explicit_flags_are_kept():
    selection = _infrastructure([
        "Create a recipe app", "--database", "orbitdb", "--storage", "arweave",
        "--rpc", "alchemy", "--paymaster", "pimlico",
    ])
    assert selection == InfrastructureSelection(
        database="orbitdb", storage="arweave", rpc="alchemy", paymaster="pimlico",
    )


@pytest.mark.parametrize("flags", [
    ["--rpc", "alchemy"],
    ["--storage", "arweave"],
    ["--paymaster", "pimlico"],
])
def test_infra_flags_without_database_are_rejected(flags, capsys):
    with pytest.raises(SystemExit) as exc_info:
        _infrastructure(["Create a recipe app", *flags])

    assert exc_info.value.code == 2
    assert "requires --database" in capsys.readouterr().err
