"""Tests for component, hook, util, type and config synthesis."""
from app.generators.app_gen.field_registry import FieldRegistry, ModelField
from app.generators.app_gen.render_components import synthesize_components
from app.generators.app_gen.render_hooks import synthesize_hooks
from app.generators.app_gen.render_support import (
    synthesize_config,
    synthesize_types,
    synthesize_utils,
)
from app.generators.app_gen.types import AppSpecification, InfrastructureSelection


def _spec(data_models=("User", "Recipe"), endpoints=("/api/recipes",)):
    return AppSpecification(
        title="RecipeShare",
        description="Share recipes",
        features=("Recipe Upload", "Search"),
        data_models=tuple(data_models),
        api_endpoints=tuple(endpoints),
        integrations=(),
        ui_components=("Header", "MainContent", "Footer"),
        complexity="medium",
    )


FIREPROOF = InfrastructureSelection(database="fireproof", storage="ipfs", rpc="alchemy", paymaster="coinbase-paymaster")
ORBITDB = InfrastructureSelection(database="orbitdb", storage="arweave", rpc="quicknode")


def test_components_always_have_skeleton():
    """Test that the four skeleton components exist whatever the specification says."""
    empty = AppSpecification(
        title="Empty", description="", features=(), data_models=(),
        api_endpoints=(), integrations=(), ui_components=(),
    )
    for spec in (empty, _spec()):
        for infra in (None, FIREPROOF, ORBITDB):
            components = synthesize_components(spec, infra)
            assert set(components) >= {"App.tsx", "Header.tsx", "MainContent.tsx", "Footer.tsx"}


def test_components_embed_specification_fields():
    components = synthesize_components(_spec())

    assert "import { Header } from './Header';" in components["App.tsx"]
    assert 'document.title = "RecipeShare";' in components["App.tsx"]
    assert '{"RecipeShare"}' in components["Header.tsx"]
    main = components["MainContent.tsx"]
    assert '{"Share recipes"}' in main
    assert '"Recipe Upload"' in main
    assert '"Search"' in main
    assert "export const Footer" in components["Footer.tsx"]


def test_main_content_data_listing_only_for_local_first():
    """Test that the data-listing block depends on the fireproof database id."""
    with_data = synthesize_components(_spec(), FIREPROOF)["MainContent.tsx"]
    assert "useFireproofData" in with_data
    assert 'id="data"' in with_data

    for infra in (None, ORBITDB):
        without = synthesize_components(_spec(), infra)["MainContent.tsx"]
        assert "useFireproofData" not in without
        assert 'id="data"' not in without


def test_titles_are_quoted_as_literals():
    """Test that quotes in user text cannot break out of the generated string literal."""
    spec = AppSpecification(
        title='Bob\'s "Best" App', description="x", features=(), data_models=(),
        api_endpoints=(), integrations=(), ui_components=(),
    )
    app_tsx = synthesize_components(spec)["App.tsx"]
    assert 'document.title = "Bob\'s \\"Best\\" App";' in app_tsx


def test_auth_hook_requires_user_model():
    assert "useAuth.ts" in synthesize_hooks(_spec(data_models=("User", "Recipe")))
    assert "useAuth.ts" not in synthesize_hooks(_spec(data_models=("Recipe",)))
    assert "useAuth.ts" not in synthesize_hooks(_spec(data_models=("user",)))


def test_local_first_hook_requires_fireproof():
    hooks = synthesize_hooks(_spec(), FIREPROOF)
    assert "useFireproof.ts" in hooks
    assert 'export const DATABASE_NAME = "recipeshare-db";' in hooks["useFireproof.ts"]

    assert "useFireproof.ts" not in synthesize_hooks(_spec(), ORBITDB)
    assert "useFireproof.ts" not in synthesize_hooks(_spec(), None)


def test_hooks_empty_without_user_or_fireproof():
    assert synthesize_hooks(_spec(data_models=("Recipe",)), ORBITDB) == {}


def test_utils_contain_helpers_and_routes():
    utils = synthesize_utils(_spec(endpoints=("/api/recipes", "/api/users/profile")))

    assert set(utils) == {"helpers.ts", "constants.ts"}
    assert "export const truncateText" in utils["helpers.ts"]
    constants = utils["constants.ts"]
    assert 'export const APP_NAME = "RecipeShare";' in constants
    assert '"recipes": "/api/recipes"' in constants
    assert '"users-profile": "/api/users/profile"' in constants


def test_types_use_model_heuristics():
    """Test that User, Post/Content and other models get their field templates."""
    types = synthesize_types(_spec(data_models=("User", "Post", "Content", "Recipe")))

    assert "export interface User {" in types
    assert "  email: string;" in types
    assert "  avatar?: string;" in types
    assert "export interface Post {" in types
    assert "export interface Content {" in types
    assert types.count("  authorId: string;") == 2
    assert types.count("  published: boolean;") == 2
    assert "export interface Recipe {" in types
    assert "  description?: string;" in types

    assert types.count("  id: string;") == 4
    assert types.count("  createdAt: string;") == 4
    assert types.count("  updatedAt: string;") == 4


def test_type_names_are_pascal_cased():
    types = synthesize_types(_spec(data_models=("recipe step", "Comment")))
    assert "export interface RecipeStep {" in types
    assert "export interface Comment {" in types


def test_types_with_extended_registry():
    """Test that an extended registry adds a model template without touching the default."""
    registry = FieldRegistry.default().with_model(
        "Recipe",
        (ModelField("ingredients", "string[]", "ingredients", "TEXT[]"),),
    )
    types = synthesize_types(_spec(data_models=("Recipe",)), registry)
    assert "  ingredients: string[];" in types
    assert "  name: string;" not in types

    default_types = synthesize_types(_spec(data_models=("Recipe",)))
    assert "ingredients" not in default_types


def test_config_embeds_spec_and_infrastructure():
    config = synthesize_config(_spec(), FIREPROOF)

    assert config.startswith("export const appConfig = {")
    assert '"title": "RecipeShare"' in config
    assert '"database": "fireproof"' in config
    assert '"paymaster": "coinbase-paymaster"' in config
    assert "theme: {" in config

    assert "infrastructure: null," in synthesize_config(_spec(), None)


def test_synthesis_is_deterministic():
    """Test that identical inputs give byte-identical output."""
    spec = _spec()
    for infra in (None, FIREPROOF, ORBITDB):
        assert synthesize_components(spec, infra) == synthesize_components(spec, infra)
        assert synthesize_hooks(spec, infra) == synthesize_hooks(spec, infra)
        assert synthesize_config(spec, infra) == synthesize_config(spec, infra)
    assert synthesize_utils(spec) == synthesize_utils(spec)
    assert synthesize_types(spec) == synthesize_types(spec)
