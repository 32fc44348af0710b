from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from .. import models, schemas
from .business_service import BusinessService
from .profile_service import ProfileService

logger = logging.getLogger(__name__)


def _matches(term: Optional[str], *values: Optional[str]) -> bool:
    if not term:
        return True
    needle = term.lower()
    return any(needle in (value or "").lower() for value in values)


class AdminService:
    """Business and user management for administrators."""

    @staticmethod
    def list_business_summaries(db: Session, search: Optional[str] = None) -> List[schemas.BusinessSummary]:
        summaries = []
        for business in BusinessService.list_newest_first(db):
            if not _matches(search, business.name, business.description):
                continue
            summaries.append(schemas.BusinessSummary(
                business=schemas.BusinessResponse.model_validate(business),
                user_count=ProfileService.count(db, filters={"business_id": business.id}),
                project_stats=BusinessService.project_stats(db, business.id),
            ))
        return summaries

    @staticmethod
    def create_business(db: Session, request: schemas.BusinessCreate) -> models.Business:
        business_id = BusinessService.create(db, name=request.name, description=request.description)
        return BusinessService.get_by_id(db, business_id)

    @staticmethod
    def list_profiles(db: Session, search: Optional[str] = None) -> List[models.UserProfile]:
        return [
            profile for profile in ProfileService.list_newest_first(db)
            if _matches(search, profile.name, profile.user_id, profile.role.value)
        ]

    @staticmethod
    def provision_profile(db: Session, request: schemas.UserProfileCreate) -> models.UserProfile:
        """Create a profile for someone who has not signed in yet, keyed by their email."""
        profile_id = ProfileService.create_profile(
            db,
            user_id=request.email,
            business_id=request.business_id,
            role=request.role,
            name=request.name,
        )
        logger.info(f"Provisioned profile {profile_id} for {request.email}")
        return ProfileService.get_by_id(db, profile_id)

    @staticmethod
    def change_role(db: Session, profile_id: str, request: schemas.UserProfileRoleUpdate) -> models.UserProfile:
        profile = ProfileService.update_role(db, profile_id, request.role)
        logger.info(f"Changed role of profile {profile_id} to {request.role.value}")
        return profile
