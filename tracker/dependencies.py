import logging

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

# Re-export database dependency
from .db import get_db

# Re-export authentication dependency
from .auth import get_current_user

from . import models
from .enums import AuthState
from .session import SessionContext

logger = logging.getLogger(__name__)


def get_session_context(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> SessionContext:
    """Signed-in session for the bearer of the request, provisioning on first use."""
    session = SessionContext()
    if session.sign_in(db, current_user) != AuthState.HAS_PROFILE:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User profile is unavailable"
        )
    return session


def require_admin(session: SessionContext = Depends(get_session_context)) -> SessionContext:
    """Restrict a route to profiles holding the admin role."""
    if not session.is_admin:
        logger.warning(f"User {session.user.id} denied admin access")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return session
