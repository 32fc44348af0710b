from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from ..enums import UserRole


class UserProfileResponse(BaseModel):
    id: str
    user_id: str
    business_id: str
    role: UserRole
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserProfileCreate(BaseModel):
    """Admin-provisioned profile; the email doubles as the user id until that person signs in."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    role: UserRole = UserRole.STAFF
    business_id: str


class UserProfileRoleUpdate(BaseModel):
    role: UserRole
