from typing import List, Optional
import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..core.settings import Settings, get_settings
from ..enums import UserRole
from ..sample_data import SAMPLE_PROJECTS
from .business_service import BusinessService
from .profile_service import ProfileService
from .project_service import ProjectService

logger = logging.getLogger(__name__)


class BootstrapService:
    """First sign-in provisioning: default business, admin profile and demo projects."""

    @staticmethod
    def initialize_database(db: Session, settings: Optional[Settings] = None) -> Optional[models.Business]:
        """Make sure the default business exists. Failures are logged, not raised."""
        try:
            business = BusinessService.ensure_default(db, settings)
            logger.info("Database initialized successfully")
            return business
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database initialization failed: {e}")
            return None

    @staticmethod
    def seed_sample_projects(db: Session, user_id: str, business_id: str) -> List[str]:
        """
        Create the demo projects for a business that has none yet.

        The existence check and the inserts are separate statements, so two
        concurrent first sign-ins against one business can both seed. Store
        errors and insert conflicts are logged, not raised.

        Returns:
            Ids of the projects created; empty when the business already had projects
        """
        created = []
        try:
            if ProjectService.has_projects(db, business_id):
                logger.info(f"Sample data already exists for business {business_id}")
                return []

            for definition in SAMPLE_PROJECTS:
                created.append(ProjectService.create_project(db, dict(definition), business_id, user_id))
        except (SQLAlchemyError, HTTPException) as e:
            if isinstance(e, SQLAlchemyError):
                db.rollback()
            detail = e.detail if isinstance(e, HTTPException) else str(e)
            logger.error(f"Error initializing sample data for business {business_id}: {detail}")
            return created

        logger.info(f"Sample data initialized for business {business_id}: {len(created)} projects")
        return created

    @staticmethod
    def provision_new_user(
        db: Session,
        user: models.User,
        settings: Optional[Settings] = None,
        business_id: Optional[str] = None,
    ) -> models.UserProfile:
        """
        Give a first-time identity a business and an admin profile, then seed.

        Business creation, profile creation and seeding commit independently;
        a failure in a later step leaves the earlier ones in place.
        """
        settings = settings or get_settings()
        if business_id is None:
            business = BusinessService.ensure_default(db, settings)
        else:
            business = BusinessService.get_by_id(db, business_id)
            if business is None:
                business = BusinessService.get_by_id(
                    db,
                    BusinessService.create(
                        db,
                        id=business_id,
                        name=settings.default_business_name,
                        description=settings.default_business_description,
                    ),
                )

        # First sign-in of an identity makes it the admin of its business
        profile_id = ProfileService.create_profile(
            db,
            user_id=user.id,
            business_id=business.id,
            role=UserRole.ADMIN,
            name=user.display_name or user.email or "User",
        )
        logger.info(f"Created admin profile {profile_id} for user {user.id} in business {business.id}")

        if settings.seed_sample_data:
            BootstrapService.seed_sample_projects(db, user.id, business.id)

        return ProfileService.get_by_id(db, profile_id)
