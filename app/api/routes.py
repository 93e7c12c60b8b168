from fastapi import APIRouter
from app.api.routes_health import router as health_router
from app.api.routes_generate import router as generate_router
from app.api.routes_catalog import router as catalog_router
from app.api.routes_projects import router as projects_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(generate_router, tags=["generate"])
router.include_router(catalog_router, tags=["catalog"])
router.include_router(projects_router, tags=["projects"])
