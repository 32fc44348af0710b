from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from .. import schemas
from ..dependencies import get_db, get_session_context
from ..services.board_service import KanbanBoard
from ..services.detail_service import ProjectDetailService
from ..services.project_service import ProjectService
from ..session import SessionContext

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Project])
def list_projects(
    search: Optional[str] = Query(None, description="Match against name, description or owner"),
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """List the current business's projects, most recently updated first"""
    projects = ProjectService.list_by_business(db, session.business_id)
    return ProjectService.search(projects, search)


@router.post("", response_model=schemas.Project, status_code=status.HTTP_201_CREATED)
def create_project(
    project: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Create a new project for the current user's business"""
    project_id = ProjectService.create_project(db, project, session.business_id, session.user.id)
    return ProjectService.get_by_id(db, project_id)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(
    project_id: str,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Get a single project of the current business"""
    project, _ = ProjectDetailService.load(db, project_id, session.business_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return project


@router.patch("/{project_id}", response_model=schemas.Project)
def update_project(
    project_id: str,
    changes: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Save edits from the project detail view"""
    return ProjectDetailService.save(db, project_id, session.business_id, changes)


@router.patch("/{project_id}/status", response_model=schemas.Project)
def update_project_status(
    project_id: str,
    request: schemas.ProjectStatusUpdate,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Change only the status of a project"""
    return ProjectDetailService.save(
        db, project_id, session.business_id, schemas.ProjectUpdate(status=request.status)
    )


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Delete a project. Deleting a project that does not exist is not an error."""
    project = ProjectService.get_by_id(db, project_id)
    if project is not None and project.business_id != session.business_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    KanbanBoard(db, session.business_id).remove(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
