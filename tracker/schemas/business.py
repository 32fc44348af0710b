from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BusinessBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class BusinessCreate(BusinessBase):
    pass


class BusinessResponse(BusinessBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BusinessProjectStats(BaseModel):
    total: int = 0
    active: int = 0
    completed: int = 0


class BusinessSummary(BaseModel):
    business: BusinessResponse
    user_count: int
    project_stats: BusinessProjectStats
