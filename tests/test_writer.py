"""Tests for writing a bundle to disk."""
import tempfile
from pathlib import Path
from app.generators.app_gen.deployment import describe_deployment
from app.generators.app_gen.render_backend import synthesize_backend
from app.generators.app_gen.render_components import synthesize_components
from app.generators.app_gen.render_hooks import synthesize_hooks
from app.generators.app_gen.render_support import synthesize_config, synthesize_types, synthesize_utils
from app.generators.app_gen.types import (
    AppSpecification,
    GeneratedArtifactBundle,
    GeneratedCode,
    InfrastructureSelection,
)
from app.generators.app_gen.writer import bundle_to_files, write_bundle


def _bundle(data_models=("User", "Recipe")):
    spec = AppSpecification(
        title="RecipeShare",
        description="Share recipes",
        features=("Recipe Upload",),
        data_models=tuple(data_models),
        api_endpoints=("/api/recipes",),
        integrations=(),
        ui_components=(),
    )
    infra = InfrastructureSelection(database="fireproof", storage="ipfs", rpc="alchemy")
    return GeneratedArtifactBundle(
        title=spec.title,
        description=spec.description,
        features=list(spec.features),
        code=GeneratedCode(
            components=synthesize_components(spec, infra),
            hooks=synthesize_hooks(spec, infra),
            utils=synthesize_utils(spec),
            types=synthesize_types(spec),
            config=synthesize_config(spec, infra),
        ),
        backend=synthesize_backend(spec, infra),
        deployment=describe_deployment(spec, infra),
        infrastructure=infra,
    )


def test_write_bundle_creates_project_tree():
    """Test that every bundle entry lands at its project path."""
    bundle = _bundle()
    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir) / "generated"
        files = write_bundle(bundle, out_dir)

        expected = [
            "src/components/App.tsx",
            "src/components/Header.tsx",
            "src/components/MainContent.tsx",
            "src/components/Footer.tsx",
            "src/hooks/useAuth.ts",
            "src/hooks/useFireproof.ts",
            "src/lib/helpers.ts",
            "src/lib/constants.ts",
            "src/types/index.ts",
            "src/config/app.config.ts",
            "supabase/schema.sql",
            "supabase/functions/recipes/index.ts",
            ".env.example",
        ]
        assert sorted(f.path for f in files) == sorted(expected)
        for path in expected:
            assert (out_dir / path).is_file(), f"{path} was not written"

        assert (out_dir / "supabase/schema.sql").read_text(encoding="utf-8") == bundle.backend.schema
        env_example = (out_dir / ".env.example").read_text(encoding="utf-8")
        assert "VITE_FIREPROOF_DB_NAME=recipeshare-db\n" in env_example
        assert "VITE_ALCHEMY_API_KEY=your-alchemy-api-key\n" in env_example


def test_schema_file_skipped_without_models():
    paths = [f.path for f in bundle_to_files(_bundle(data_models=()))]
    assert "supabase/schema.sql" not in paths
    assert "supabase/functions/recipes/index.ts" in paths
