from datetime import date
from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..enums import ProjectStatus
from ..sample_data import fallback_projects
from .project_service import ProjectService

logger = logging.getLogger(__name__)

RECENT_PROJECT_LIMIT = 5


def is_overdue(project, today: Optional[date] = None) -> bool:
    """A project is overdue once its target date has passed and it is not completed."""
    if not project.target_completion_date or project.status == ProjectStatus.COMPLETED:
        return False
    return project.target_completion_date < (today or date.today())


class DashboardService:
    """Aggregate counts and recent activity for a business."""

    @staticmethod
    def calculate_stats(projects: List[models.Project], today: Optional[date] = None) -> schemas.DashboardStats:
        total = len(projects)
        completed = sum(1 for p in projects if p.status == ProjectStatus.COMPLETED)
        return schemas.DashboardStats(
            total_projects=total,
            in_progress=sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS),
            completed=completed,
            overdue=sum(1 for p in projects if is_overdue(p, today)),
            completion_rate=(completed / total) * 100 if total > 0 else 0.0,
        )

    @staticmethod
    def build(db: Session, business_id: str, today: Optional[date] = None) -> schemas.DashboardResponse:
        """Dashboard for a business, falling back to the sample dataset if the store fails."""
        is_fallback = False
        try:
            projects = ProjectService.list_by_business(db, business_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error loading projects for dashboard of business {business_id}: {e}")
            projects = fallback_projects(business_id)
            is_fallback = True

        return schemas.DashboardResponse(
            stats=DashboardService.calculate_stats(projects, today),
            recent_projects=[schemas.Project.model_validate(p) for p in projects[:RECENT_PROJECT_LIMIT]],
            is_fallback=is_fallback,
        )
