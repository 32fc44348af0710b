from pydantic import BaseModel, EmailStr
from datetime import datetime
from typing import Optional

from .business import BusinessResponse
from .profile import UserProfileResponse

class SignupRequest(BaseModel):
    email: EmailStr
    password: str
    display_name: Optional[str] = None

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str

class UserResponse(BaseModel):
    id: str
    email: str
    display_name: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}

class SignupResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str

class LoginResponse(BaseModel):
    user: UserResponse
    profile: Optional[UserProfileResponse] = None
    business: Optional[BusinessResponse] = None
    access_token: str
    token_type: str

class SessionResponse(BaseModel):
    state: str
    user: Optional[UserResponse] = None
    profile: Optional[UserProfileResponse] = None
    business: Optional[BusinessResponse] = None
