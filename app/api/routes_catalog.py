from typing import Optional
from fastapi import APIRouter
from app.generators.app_gen.catalog import load_infrastructure_catalog, load_templates

router = APIRouter(prefix="/catalog")

@router.get("/infrastructure")
def get_infrastructure_catalog():
    return load_infrastructure_catalog().to_dict()

@router.get("/infrastructure/recommended/{app_type}")
def get_recommended_stack(app_type: str):
    """Suggested stack for an app type; unknown types get the default stack."""
    return load_infrastructure_catalog().recommended_stack(app_type).to_dict()

@router.get("/templates")
def get_templates(category: Optional[str] = None):
    templates = load_templates()
    if category:
        templates = [t for t in templates if t.get("category") == category]
    return {"templates": templates}
