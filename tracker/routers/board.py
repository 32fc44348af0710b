from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from .. import schemas
from ..dependencies import get_db, get_session_context
from ..services.board_service import KanbanBoard
from ..session import SessionContext

router = APIRouter(prefix="/board", tags=["Board"])


@router.get("", response_model=schemas.BoardResponse)
def get_board(
    search: Optional[str] = Query(None, description="Match against name, description or owner"),
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """Kanban columns (todo, in_progress, review, completed) for the current business"""
    board = KanbanBoard(db, session.business_id).load()
    return schemas.BoardResponse(
        columns=board.columns(search),
        search=search,
        is_fallback=board.is_fallback
    )


@router.post("/move", response_model=schemas.MoveResponse)
def move_card(
    request: schemas.MoveRequest,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context)
):
    """
    Handle a card drop. Moving across columns stores the destination as the
    project's status; dropping within the same column changes nothing stored.
    """
    board = KanbanBoard(db, session.business_id).load()
    if board.find(request.project_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    result = board.move(request.project_id, request.source, request.destination)
    return schemas.MoveResponse(
        success=result.success,
        project=result.project,
        error_message=result.error_message
    )
