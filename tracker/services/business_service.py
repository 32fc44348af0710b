from typing import List, Optional
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .. import models
from ..core.settings import Settings, get_settings
from ..enums import ProjectStatus
from ..schemas import BusinessProjectStats
from .collection_service import CollectionService

logger = logging.getLogger(__name__)


class BusinessService(CollectionService):
    """Data access for businesses (tenants)."""

    model = models.Business
    id_prefix = "business"
    label = "Business"

    @classmethod
    def ensure_default(cls, db: Session, settings: Optional[Settings] = None) -> models.Business:
        """Return the default business, creating it the first time it is needed."""
        settings = settings or get_settings()
        business = cls.get_by_id(db, settings.default_business_id)
        if business is not None:
            return business

        cls.create(
            db,
            id=settings.default_business_id,
            name=settings.default_business_name,
            description=settings.default_business_description,
        )
        logger.info(f"Default business {settings.default_business_id} initialized")
        return cls.get_by_id(db, settings.default_business_id)

    @classmethod
    def list_newest_first(cls, db: Session) -> List[models.Business]:
        return cls.list(db, order_by="-created_at")

    @classmethod
    def project_stats(cls, db: Session, business_id: str) -> BusinessProjectStats:
        projects = db.query(models.Project.status).filter(
            models.Project.business_id == business_id
        ).all()
        statuses = [row[0] for row in projects]
        return BusinessProjectStats(
            total=len(statuses),
            active=sum(1 for s in statuses if s == ProjectStatus.IN_PROGRESS),
            completed=sum(1 for s in statuses if s == ProjectStatus.COMPLETED),
        )

    @classmethod
    def delete(cls, db: Session, record_id: str) -> bool:
        """
        Delete a business that no longer owns any users or projects.

        Raises:
            HTTPException: 409 while profiles or projects still reference it
        """
        profile_count = db.query(models.UserProfile).filter(
            models.UserProfile.business_id == record_id
        ).count()
        project_count = db.query(models.Project).filter(
            models.Project.business_id == record_id
        ).count()
        if profile_count or project_count:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Business still has {profile_count} users and {project_count} projects"
            )
        return super().delete(db, record_id)
