from enum import Enum

class ProjectStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"

class EffortLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    STAFF = "staff"

class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTH_CHECKING = "auth_checking"
    NO_PROFILE = "no_profile"
    HAS_PROFILE = "has_profile"
