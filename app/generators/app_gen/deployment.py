"""Environment variables and build commands for the generated app."""
from typing import Optional

from app.generators.app_gen.catalog import ALCHEMY_RPC, LOCAL_FIRST_DATABASE
from app.generators.app_gen.render_hooks import fireproof_database_name
from app.generators.app_gen.types import (
    AppSpecification,
    DeploymentDescription,
    InfrastructureSelection,
)

BUILD_COMMANDS = ("npm install", "npm run build", "npm run start")


def describe_deployment(spec: AppSpecification, infra: Optional[InfrastructureSelection] = None) -> DeploymentDescription:
    env_vars = {
        "VITE_APP_NAME": spec.title,
        "VITE_APP_VERSION": "1.0.0",
        "VITE_SUPABASE_URL": "your-supabase-url",
        "VITE_SUPABASE_ANON_KEY": "your-supabase-anon-key",
    }
    if infra is not None and infra.rpc == ALCHEMY_RPC:
        env_vars["VITE_ALCHEMY_API_KEY"] = "your-alchemy-api-key"
    if infra is not None and infra.database == LOCAL_FIRST_DATABASE:
        env_vars["VITE_FIREPROOF_DB_NAME"] = fireproof_database_name(spec)

    # Same steps for every infrastructure choice
    return DeploymentDescription(env_vars=env_vars, build_commands=list(BUILD_COMMANDS))
