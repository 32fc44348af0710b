from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ProjectAssignmentCreate(BaseModel):
    user_id: str
    role: Optional[str] = None


class ProjectAssignment(BaseModel):
    id: str
    project_id: str
    user_id: str
    role: Optional[str] = None
    assigned_at: datetime

    model_config = {"from_attributes": True}
