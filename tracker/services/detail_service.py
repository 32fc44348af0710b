from typing import Optional, Tuple
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..sample_data import fallback_projects
from .project_service import ProjectService

logger = logging.getLogger(__name__)


class ProjectDetailService:
    """Load and save a single project for the detail/edit view."""

    @staticmethod
    def load(db: Session, project_id: str, business_id: str) -> Tuple[Optional[models.Project], bool]:
        """
        Returns:
            (project or None, whether the sample dataset was used)
        """
        try:
            project = ProjectService.get_for_business(db, project_id, business_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error loading project {project_id}: {e}")
            project = None
            for sample in fallback_projects(business_id):
                if sample.id == project_id:
                    project = sample
            return project, True
        return project, False

    @staticmethod
    def save(
        db: Session, project_id: str, business_id: str, changes: schemas.ProjectUpdate
    ) -> models.Project:
        """
        Apply the edited fields to a project of the business.

        Raises:
            HTTPException: 404 if the project is not in the business, 503 if the
                store rejects the write
        """
        if ProjectService.get_for_business(db, project_id, business_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Project not found"
            )
        fields = changes.model_dump(exclude_unset=True)
        try:
            return ProjectService.update(db, project_id, fields)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving project {project_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Failed to save project"
            )
