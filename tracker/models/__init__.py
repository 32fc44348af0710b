# Import and re-export all models so `from tracker.models import Project` works
# and every table is registered on Base.metadata

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .user import User
from .business import Business
from .user_profile import UserProfile
from .project import Project
from .project_assignment import ProjectAssignment

# Ensure all models are available at package level
__all__ = [
    "Base",
    "User",
    "Business",
    "UserProfile",
    "Project",
    "ProjectAssignment",
]
