# Business schemas
from .business import (
    BusinessBase,
    BusinessCreate,
    BusinessResponse,
    BusinessProjectStats,
    BusinessSummary
)

# Profile schemas
from .profile import (
    UserProfileResponse,
    UserProfileCreate,
    UserProfileRoleUpdate
)

# Auth schemas
from .auth import (
    SignupRequest,
    LoginRequest,
    Token,
    UserResponse,
    SignupResponse,
    LoginResponse,
    SessionResponse
)

# Project schemas
from .project import (
    ProjectFields,
    ProjectCreate,
    ProjectUpdate,
    ProjectStatusUpdate,
    Project
)

# Assignment schemas
from .assignment import ProjectAssignmentCreate, ProjectAssignment

# View schemas
from .views import (
    DashboardStats,
    DashboardResponse,
    BoardColumn,
    BoardResponse,
    MoveRequest,
    MoveResponse
)

# Make all schemas available at package level
__all__ = [
    # Business
    "BusinessBase",
    "BusinessCreate",
    "BusinessResponse",
    "BusinessProjectStats",
    "BusinessSummary",
    # Profile
    "UserProfileResponse",
    "UserProfileCreate",
    "UserProfileRoleUpdate",
    # Auth
    "SignupRequest",
    "LoginRequest",
    "Token",
    "UserResponse",
    "SignupResponse",
    "LoginResponse",
    "SessionResponse",
    # Project
    "ProjectFields",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectStatusUpdate",
    "Project",
    # Assignment
    "ProjectAssignmentCreate",
    "ProjectAssignment",
    # Views
    "DashboardStats",
    "DashboardResponse",
    "BoardColumn",
    "BoardResponse",
    "MoveRequest",
    "MoveResponse"
]
