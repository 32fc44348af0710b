from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime

from ..enums import ProjectStatus, EffortLevel


class ProjectFields(BaseModel):
    """Editable project fields shared by create and update payloads."""
    project_description: Optional[str] = None
    start_date: Optional[date] = None
    target_completion_date: Optional[date] = None
    project_owner: Optional[str] = None
    support_management_resource: Optional[str] = None
    support_role: Optional[str] = None
    time_commitment_per_week: Optional[int] = Field(None, ge=0)
    project_docs_links: Optional[str] = None
    expected_outcomes: Optional[str] = None
    training_needed: Optional[str] = None
    tool_process_change: Optional[str] = None
    meeting_cadence: Optional[str] = None
    comm_channel: Optional[str] = None
    escalation_path: Optional[str] = None
    dependencies: Optional[str] = None
    key_milestones: Optional[str] = None
    risks_blockers: Optional[str] = None
    action_items: Optional[str] = None
    latest_update: Optional[str] = None


class ProjectCreate(ProjectFields):
    project_name: str
    status: ProjectStatus = ProjectStatus.TODO
    effort_level: EffortLevel = EffortLevel.MEDIUM

    @field_validator("project_name")
    @classmethod
    def project_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name is required")
        return value


class ProjectUpdate(ProjectFields):
    """Partial update; only the fields present in the payload are written."""
    project_name: Optional[str] = None
    status: Optional[ProjectStatus] = None
    effort_level: Optional[EffortLevel] = None

    @field_validator("project_name", "status", "effort_level")
    @classmethod
    def required_fields_not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        if info.field_name == "project_name":
            value = value.strip()
            if not value:
                raise ValueError("Project name is required")
        return value


class ProjectStatusUpdate(BaseModel):
    status: ProjectStatus


class Project(ProjectFields):
    id: str
    project_name: str
    status: ProjectStatus
    effort_level: EffortLevel
    business_id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
