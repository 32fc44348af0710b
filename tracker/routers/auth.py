from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..dependencies import get_db, get_session_context
from ..schemas import (
    SignupRequest,
    LoginRequest,
    SignupResponse,
    LoginResponse,
    SessionResponse,
    UserResponse,
    UserProfileResponse,
    BusinessResponse
)
from ..services.auth_service import AuthService
from ..session import SessionContext

router = APIRouter(prefix="/auth", tags=["authentication"])

@router.post("/signup", response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    db: Session = Depends(get_db)
):
    """Register a new user identity."""
    return AuthService.signup_user(db, request)

@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """Authenticate user, provision their profile on first sign-in and return an access token."""
    return AuthService.login_user(db, request)


@router.get("/me", response_model=SessionResponse)
async def get_current_session_info(
    session: SessionContext = Depends(get_session_context)
):
    """Get the current user together with their profile and business."""
    return SessionResponse(
        state=session.state.value,
        user=UserResponse.model_validate(session.user),
        profile=UserProfileResponse.model_validate(session.profile),
        business=BusinessResponse.model_validate(session.business) if session.business else None
    )


@router.post("/logout", response_model=SessionResponse)
async def logout(
    session: SessionContext = Depends(get_session_context)
):
    """Tear down the session. Tokens are stateless, so clients discard theirs."""
    return SessionResponse(state=session.sign_out().value)
