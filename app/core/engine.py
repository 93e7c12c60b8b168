from __future__ import annotations
import logging
from typing import Optional
from app.core.config import GeneratorConfig
from app.core.llm import OpenRouterClient
from app.core.workflow import GenerationStage
from app.generators.app_gen.analyzer import RequirementAnalyzer
from app.generators.app_gen.catalog import InfrastructureCatalog, load_infrastructure_catalog
from app.generators.app_gen.deployment import describe_deployment
from app.generators.app_gen.field_registry import FieldRegistry
from app.generators.app_gen.render_backend import synthesize_backend
from app.generators.app_gen.render_components import synthesize_components
from app.generators.app_gen.render_hooks import synthesize_hooks
from app.generators.app_gen.render_support import (
    synthesize_config,
    synthesize_types,
    synthesize_utils,
)
from app.generators.app_gen.types import (
    GeneratedArtifactBundle,
    GeneratedCode,
    InfrastructureSelection,
)

log = logging.getLogger(__name__)

class AppGenerator:
    """
    Runs analyze -> components/hooks/utils/types/config -> backend -> deployment
    for one request and assembles the bundle.

    Only the analyze stage does I/O (one completion call); its UpstreamError
    propagates to the caller. Every later stage is a pure function of the
    specification and infrastructure selection.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        client=None,
        catalog: Optional[InfrastructureCatalog] = None,
        registry: Optional[FieldRegistry] = None,
    ):
        self.config = config
        self.client = client or OpenRouterClient(
            api_key=config.openrouter_api_key or "",
            base_url=config.openrouter_base_url,
            model=config.model,
            timeout=config.timeout_seconds,
        )
        self.analyzer = RequirementAnalyzer(
            self.client,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        self.catalog = catalog
        self.registry = registry or FieldRegistry.default()

    def _log_stage(self, request_id: str, stage: GenerationStage) -> None:
        log.info("Running stage", extra={"request_id": request_id, "stage": stage.value})

    def generate_full_app(
        self,
        prompt: str,
        template_id: Optional[str] = None,
        infrastructure: Optional[InfrastructureSelection] = None,
        request_id: str = "-",
    ) -> GeneratedArtifactBundle:
        if infrastructure is not None and self.config.strict_infrastructure:
            catalog = self.catalog or load_infrastructure_catalog()
            catalog.validate(infrastructure)

        self._log_stage(request_id, GenerationStage.ANALYZE)
        try:
            analysis = self.analyzer.analyze(prompt, template_id)
        except Exception:
            log.error("Stage failed", extra={"request_id": request_id, "stage": GenerationStage.ANALYZE.value})
            raise
        spec = analysis.spec

        self._log_stage(request_id, GenerationStage.COMPONENTS)
        components = synthesize_components(spec, infrastructure)
        self._log_stage(request_id, GenerationStage.HOOKS)
        hooks = synthesize_hooks(spec, infrastructure)
        self._log_stage(request_id, GenerationStage.UTILS)
        utils = synthesize_utils(spec)
        self._log_stage(request_id, GenerationStage.TYPES)
        types = synthesize_types(spec, self.registry)
        self._log_stage(request_id, GenerationStage.CONFIG)
        config = synthesize_config(spec, infrastructure)

        self._log_stage(request_id, GenerationStage.BACKEND)
        backend = synthesize_backend(spec, infrastructure, self.registry)

        self._log_stage(request_id, GenerationStage.DEPLOYMENT)
        deployment = describe_deployment(spec, infrastructure)

        log.info(
            "Generation complete: %s (degraded=%s)", spec.title, analysis.degraded,
            extra={"request_id": request_id, "stage": GenerationStage.DONE.value},
        )
        return GeneratedArtifactBundle(
            title=spec.title,
            description=spec.description,
            features=list(spec.features),
            code=GeneratedCode(
                components=components,
                hooks=hooks,
                utils=utils,
                types=types,
                config=config,
            ),
            backend=backend,
            deployment=deployment,
            degraded=analysis.degraded,
            infrastructure=infrastructure,
        )
