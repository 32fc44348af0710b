from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .. import models
from .collection_service import CollectionService


class AssignmentService(CollectionService):
    """Data access for project assignments (project <-> user profile links)."""

    model = models.ProjectAssignment
    id_prefix = "assignment"
    label = "Project assignment"
    created_field = "assigned_at"
    updated_field = None

    @classmethod
    def assign(cls, db: Session, project_id: str, user_id: str, role: Optional[str] = None) -> str:
        if db.query(models.Project).filter(models.Project.id == project_id).first() is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Project not found"
            )
        return cls.create(db, project_id=project_id, user_id=user_id, role=role)

    @classmethod
    def list_for_project(cls, db: Session, project_id: str) -> List[models.ProjectAssignment]:
        return cls.list(db, filters={"project_id": project_id}, order_by="assigned_at")

    @classmethod
    def list_for_user(cls, db: Session, user_id: str) -> List[models.ProjectAssignment]:
        return cls.list(db, filters={"user_id": user_id}, order_by="-assigned_at")

    @classmethod
    def unassign(cls, db: Session, project_id: str, user_id: str) -> bool:
        assignments = cls.list(db, filters={"project_id": project_id, "user_id": user_id}, limit=1)
        if not assignments:
            return False
        return cls.delete(db, assignments[0].id)
