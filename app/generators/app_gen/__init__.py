from app.generators.app_gen.analyzer import RequirementAnalyzer
from app.generators.app_gen.deployment import describe_deployment
from app.generators.app_gen.render_backend import synthesize_backend
from app.generators.app_gen.render_components import synthesize_components
from app.generators.app_gen.render_hooks import synthesize_hooks
from app.generators.app_gen.render_support import (
    synthesize_config,
    synthesize_types,
    synthesize_utils,
)
from app.generators.app_gen.writer import write_bundle
