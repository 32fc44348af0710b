from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import schemas
from ..dependencies import get_db, get_session_context
from ..services.dashboard_service import DashboardService
from ..session import SessionContext

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=schemas.DashboardResponse)
def get_dashboard(
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Project counts, completion rate and the most recently updated projects"""
    return DashboardService.build(db, session.business_id)
