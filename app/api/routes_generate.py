import logging
import uuid
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.core.config import GeneratorConfig, settings
from app.core.engine import AppGenerator
from app.core.errors import ConfigurationError, GeneratorError, InvalidInfrastructureId, UpstreamError
from app.schemas.generation import GenerateAppRequest, GenerateAppResponse

log = logging.getLogger(__name__)

router = APIRouter()

def get_generator() -> AppGenerator:
    return AppGenerator(GeneratorConfig.from_settings(settings))

def _error(status_code: int, message: str) -> JSONResponse:
    body = GenerateAppResponse(success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

@router.post("/generate-app", response_model=GenerateAppResponse)
def generate_app(req: GenerateAppRequest, generator: AppGenerator = Depends(get_generator)):
    request_id = str(uuid.uuid4())
    log.info("Generating app (category=%s)", req.category, extra={"request_id": request_id, "stage": "-"})

    infrastructure = req.infrastructure.to_selection() if req.infrastructure else None
    try:
        bundle = generator.generate_full_app(
            req.prompt,
            template_id=req.template,
            infrastructure=infrastructure,
            request_id=request_id,
        )
    except InvalidInfrastructureId as e:
        return _error(400, str(e))
    except ConfigurationError as e:
        log.error("Generator misconfigured: %s", e, extra={"request_id": request_id, "stage": "-"})
        return _error(500, str(e))
    except UpstreamError as e:
        log.error("Generation failed: %s", e, extra={"request_id": request_id, "stage": "FAILED"})
        return _error(502, str(e))
    except GeneratorError as e:
        log.error("Generation failed: %s", e, extra={"request_id": request_id, "stage": "FAILED"})
        return _error(500, str(e))

    return GenerateAppResponse(success=True, data=bundle.to_dict(), degraded=bundle.degraded)
