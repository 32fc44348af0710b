from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..core.stamps import utcnow
from ..enums import ProjectStatus
from ..sample_data import fallback_projects
from .project_service import ProjectService

logger = logging.getLogger(__name__)

STATUS_COLUMNS = [
    (ProjectStatus.TODO, "To Do"),
    (ProjectStatus.IN_PROGRESS, "In Progress"),
    (ProjectStatus.REVIEW, "Review"),
    (ProjectStatus.COMPLETED, "Completed"),
]


@dataclass
class MoveResult:
    success: bool
    project: Optional[schemas.Project] = None
    error_message: Optional[str] = None


class KanbanBoard:
    """
    Local view state of one business's kanban board.

    Cards are pydantic snapshots of the stored projects. Moves update the
    snapshot first and then persist; when persisting fails the snapshot is put
    back the way it was.
    """

    def __init__(self, db: Session, business_id: str):
        self.db = db
        self.business_id = business_id
        self.cards: List[schemas.Project] = []
        self.is_fallback = False

    def load(self) -> "KanbanBoard":
        try:
            projects = ProjectService.list_by_business(self.db, self.business_id)
            self.is_fallback = False
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error loading projects for board of business {self.business_id}: {e}")
            projects = fallback_projects(self.business_id)
            self.is_fallback = True
        self.cards = [schemas.Project.model_validate(p) for p in projects]
        return self

    def _index_of(self, project_id: str) -> Optional[int]:
        for index, card in enumerate(self.cards):
            if card.id == project_id:
                return index
        return None

    def find(self, project_id: str) -> Optional[schemas.Project]:
        index = self._index_of(project_id)
        return self.cards[index] if index is not None else None

    def projects_by_status(self, search: Optional[str] = None) -> Dict[ProjectStatus, List[schemas.Project]]:
        visible = ProjectService.search(self.cards, search)
        return {
            column_id: [card for card in visible if card.status == column_id]
            for column_id, _ in STATUS_COLUMNS
        }

    def columns(self, search: Optional[str] = None) -> List[schemas.BoardColumn]:
        grouped = self.projects_by_status(search)
        return [
            schemas.BoardColumn(id=column_id, title=title, projects=grouped[column_id])
            for column_id, title in STATUS_COLUMNS
        ]

    def move(self, project_id: str, source: ProjectStatus, destination: ProjectStatus) -> MoveResult:
        """
        Handle a card dropped from column ``source`` onto ``destination``.

        Whether anything is stored depends on the card's own status, not on
        ``source``. Dropping a card onto the column it already sits in only
        touches the local updated_at; position is not persisted.
        """
        index = self._index_of(project_id)
        if index is None:
            return MoveResult(success=False, error_message="Project not found on board")

        previous = self.cards[index]
        if source != previous.status:
            logger.warning(
                f"Move of project {project_id} reported source {source.value}, card is in {previous.status.value}"
            )
        if destination == previous.status:
            self.cards[index] = previous.model_copy(update={"updated_at": utcnow()})
            return MoveResult(success=True, project=self.cards[index])

        # Optimistic local update before the store call
        self.cards[index] = previous.model_copy(update={"status": destination, "updated_at": utcnow()})
        try:
            record = ProjectService.update(self.db, project_id, {"status": destination})
        except (SQLAlchemyError, HTTPException) as e:
            if isinstance(e, SQLAlchemyError):
                self.db.rollback()
            detail = e.detail if isinstance(e, HTTPException) else str(e)
            logger.error(f"Error updating project status for {project_id}: {detail}")
            self.cards[index] = previous
            return MoveResult(success=False, project=previous, error_message=detail)

        self.cards[index] = schemas.Project.model_validate(record)
        logger.info(f"Moved project {project_id} from {previous.status.value} to {destination.value}")
        return MoveResult(success=True, project=self.cards[index])

    def add(self, data: schemas.ProjectCreate, created_by: str) -> schemas.Project:
        project_id = ProjectService.create_project(self.db, data, self.business_id, created_by)
        card = schemas.Project.model_validate(ProjectService.get_by_id(self.db, project_id))
        self.cards.append(card)
        return card

    def remove(self, project_id: str) -> bool:
        removed = ProjectService.delete(self.db, project_id)
        self.cards = [card for card in self.cards if card.id != project_id]
        return removed
