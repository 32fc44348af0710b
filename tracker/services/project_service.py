from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .. import models, schemas
from .collection_service import CollectionService

logger = logging.getLogger(__name__)


class ProjectService(CollectionService):
    """Data access for projects."""

    model = models.Project
    id_prefix = "project"
    label = "Project"

    @classmethod
    def protected_fields(cls) -> Iterable[str]:
        # Tenant and author are fixed once the project exists
        return set(super().protected_fields()) | {"business_id", "created_by"}

    @classmethod
    def list_by_business(cls, db: Session, business_id: str) -> List[models.Project]:
        """All projects of a business, most recently updated first."""
        return cls.list(db, filters={"business_id": business_id}, order_by=["-updated_at", "id"])

    @classmethod
    def has_projects(cls, db: Session, business_id: str) -> bool:
        return bool(cls.list(db, filters={"business_id": business_id}, limit=1))

    @classmethod
    def get_for_business(
        cls, db: Session, project_id: str, business_id: str
    ) -> Optional[models.Project]:
        """Get a project only if it belongs to the given business."""
        project = cls.get_by_id(db, project_id)
        if project is None or project.business_id != business_id:
            return None
        return project

    @classmethod
    def create_project(
        cls,
        db: Session,
        data: Union[schemas.ProjectCreate, Dict[str, Any]],
        business_id: str,
        created_by: str,
    ) -> str:
        """
        Create a project inside a business.

        Raises:
            HTTPException: 400 if the business does not exist
        """
        if isinstance(data, schemas.ProjectCreate):
            data = data.model_dump()
        business = db.query(models.Business).filter(models.Business.id == business_id).first()
        if business is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Business does not exist"
            )
        return cls.create(db, **{**data, "business_id": business_id, "created_by": created_by})

    @staticmethod
    def search(projects: Iterable[Any], term: Optional[str]) -> list:
        """Case-insensitive match of ``term`` against name, description and owner."""
        if not term:
            return list(projects)
        needle = term.lower()
        return [
            project for project in projects
            if needle in (project.project_name or "").lower()
            or needle in (project.project_description or "").lower()
            or needle in (project.project_owner or "").lower()
        ]
