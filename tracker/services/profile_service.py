from typing import List, Optional, Tuple
import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .. import models
from ..enums import UserRole
from .collection_service import CollectionService

logger = logging.getLogger(__name__)


class ProfileService(CollectionService):
    """Data access for user profiles."""

    model = models.UserProfile
    id_prefix = "profile"
    label = "User profile"

    @classmethod
    def get_by_user_id(cls, db: Session, user_id: str) -> Optional[models.UserProfile]:
        profiles = cls.list(db, filters={"user_id": user_id}, limit=1)
        return profiles[0] if profiles else None

    @classmethod
    def get_with_business(
        cls, db: Session, user_id: str
    ) -> Tuple[Optional[models.UserProfile], Optional[models.Business]]:
        """Profile for an identity together with the business it belongs to."""
        profile = cls.get_by_user_id(db, user_id)
        if profile is None:
            return None, None
        business = db.query(models.Business).filter(
            models.Business.id == profile.business_id
        ).first()
        return profile, business

    @classmethod
    def find_for_identity(cls, db: Session, user: models.User) -> Optional[models.UserProfile]:
        """
        Look up the profile for an authenticated identity.

        Profiles provisioned by an admin are keyed by email until the person
        signs in; such a profile is claimed by rewriting its user_id.
        """
        profile = cls.get_by_user_id(db, user.id)
        if profile is not None:
            return profile

        provisioned = cls.get_by_user_id(db, user.email)
        if provisioned is None:
            return None
        logger.info(f"User {user.id} claimed provisioned profile {provisioned.id}")
        return cls.update(db, provisioned.id, {"user_id": user.id})

    @classmethod
    def create_profile(
        cls, db: Session, user_id: str, business_id: str, role: UserRole, name: str
    ) -> str:
        """
        Create a profile for an identity inside an existing business.

        Raises:
            HTTPException: 400 if the business does not exist, 409 if the
                identity already has a profile
        """
        business = db.query(models.Business).filter(models.Business.id == business_id).first()
        if business is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Business does not exist"
            )
        if cls.get_by_user_id(db, user_id) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User already has a profile"
            )
        return cls.create(db, user_id=user_id, business_id=business_id, role=role, name=name)

    @classmethod
    def list_newest_first(cls, db: Session) -> List[models.UserProfile]:
        return cls.list(db, order_by="-created_at")

    @classmethod
    def update_role(cls, db: Session, profile_id: str, role: UserRole) -> models.UserProfile:
        return cls.update(db, profile_id, {"role": role})

    @classmethod
    def delete_by_user_id(cls, db: Session, user_id: str) -> bool:
        profile = cls.get_by_user_id(db, user_id)
        if profile is None:
            return False
        return cls.delete(db, profile.id)
