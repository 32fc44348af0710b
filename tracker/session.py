"""
Session context for a signed-in identity.

Holds the authenticated user, their profile and business, and walks the
sign-in state machine::

    UNAUTHENTICATED -> AUTH_CHECKING -> NO_PROFILE -> HAS_PROFILE
                                     -> HAS_PROFILE

Sign-out clears everything and returns to UNAUTHENTICATED.
"""
from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .core.settings import Settings, get_settings
from .enums import AuthState, UserRole
from .services.bootstrap_service import BootstrapService
from .services.business_service import BusinessService
from .services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class SessionContext:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.state = AuthState.UNAUTHENTICATED
        self.user: Optional[models.User] = None
        self.profile: Optional[models.UserProfile] = None
        self.business: Optional[models.Business] = None
        self.provisioned = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.profile is not None and self.profile.role == UserRole.ADMIN

    @property
    def business_id(self) -> Optional[str]:
        return self.profile.business_id if self.profile is not None else None

    def on_auth_state_changed(
        self, db: Session, is_loading: bool, user: Optional[models.User]
    ) -> AuthState:
        """Handle an auth update delivered as ``{is_loading, user | None}``."""
        if is_loading:
            self.state = AuthState.AUTH_CHECKING
            return self.state
        if user is None:
            return self.sign_out()
        return self.sign_in(db, user)

    def sign_in(self, db: Session, user: models.User, business_id: Optional[str] = None) -> AuthState:
        """
        Load the profile for ``user``, provisioning one on first sign-in.

        Store failures are logged and leave the context in NO_PROFILE.
        """
        self.state = AuthState.AUTH_CHECKING
        self.user = user
        self.provisioned = False

        try:
            profile = ProfileService.find_for_identity(db, user)
            if profile is None:
                self.state = AuthState.NO_PROFILE
                profile = BootstrapService.provision_new_user(
                    db, user, settings=self.settings, business_id=business_id
                )
                self.provisioned = True
            business = BusinessService.get_by_id(db, profile.business_id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error managing user profile for {user.id}: {e}")
            self.state = AuthState.NO_PROFILE
            self.profile = None
            self.business = None
            return self.state

        self.profile = profile
        self.business = business
        self.state = AuthState.HAS_PROFILE
        return self.state

    def sign_out(self) -> AuthState:
        self.user = None
        self.profile = None
        self.business = None
        self.provisioned = False
        self.state = AuthState.UNAUTHENTICATED
        return self.state
