from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.db.models import Project
from app.schemas.projects import ProjectCreateRequest, ProjectResponse, ProjectListResponse

router = APIRouter(prefix="/projects")

def _to_response(project: Project) -> ProjectResponse:
    return ProjectResponse(
        id=project.id,
        created_at=project.created_at,
        updated_at=project.updated_at,
        title=project.title,
        description=project.description,
        category=project.category,
        template_id=project.template_id,
        infrastructure=project.infrastructure,
        bundle=project.bundle or {},
        is_published=project.is_published,
    )

def _get_or_404(db: Session, project_id: str) -> Project:
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project

@router.post("", response_model=ProjectResponse)
def create_project(req: ProjectCreateRequest, db: Session = Depends(get_db)):
    project = Project(
        title=req.title,
        description=req.description,
        category=req.category,
        template_id=req.template_id,
        infrastructure=req.infrastructure.model_dump() if req.infrastructure else None,
        bundle=req.bundle,
        is_published=False,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return _to_response(project)

@router.get("", response_model=ProjectListResponse)
def list_projects(db: Session = Depends(get_db)):
    projects = db.scalars(select(Project).order_by(Project.created_at.desc())).all()
    return ProjectListResponse(projects=[_to_response(p) for p in projects])

@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str, db: Session = Depends(get_db)):
    return _to_response(_get_or_404(db, project_id))

@router.post("/{project_id}/publish", response_model=ProjectResponse)
def publish_project(project_id: str, db: Session = Depends(get_db)):
    project = _get_or_404(db, project_id)
    project.is_published = True
    db.commit()
    db.refresh(project)
    return _to_response(project)

@router.delete("/{project_id}", status_code=204)
def delete_project(project_id: str, db: Session = Depends(get_db)):
    project = _get_or_404(db, project_id)
    db.delete(project)
    db.commit()
