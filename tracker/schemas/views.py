from pydantic import BaseModel
from typing import List, Optional

from ..enums import ProjectStatus
from .project import Project


class DashboardStats(BaseModel):
    total_projects: int
    in_progress: int
    completed: int
    overdue: int
    completion_rate: float


class DashboardResponse(BaseModel):
    stats: DashboardStats
    recent_projects: List[Project]
    is_fallback: bool = False


class BoardColumn(BaseModel):
    id: ProjectStatus
    title: str
    projects: List[Project]


class BoardResponse(BaseModel):
    columns: List[BoardColumn]
    search: Optional[str] = None
    is_fallback: bool = False


class MoveRequest(BaseModel):
    project_id: str
    source: ProjectStatus
    destination: ProjectStatus


class MoveResponse(BaseModel):
    success: bool
    project: Optional[Project] = None
    error_message: Optional[str] = None
