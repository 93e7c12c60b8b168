from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime
from app.schemas.generation import InfrastructureModel

class ProjectCreateRequest(BaseModel):
    title: str = Field(..., examples=["RecipeShare"])
    description: str = ""
    category: str = "web"
    template_id: Optional[str] = None
    infrastructure: Optional[InfrastructureModel] = None
    bundle: Dict[str, Any] = Field(..., description="Generated bundle, stored verbatim")

class ProjectResponse(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime
    title: str
    description: str
    category: str
    template_id: Optional[str] = None
    infrastructure: Optional[Dict[str, Any]] = None
    bundle: Dict[str, Any] = {}
    is_published: bool = False

class ProjectListResponse(BaseModel):
    projects: List[ProjectResponse]
