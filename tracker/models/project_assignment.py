from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..db import Base
from ..core.stamps import utcnow


class ProjectAssignment(Base):
    """
    Links a user profile to a project they work on.
    """
    __tablename__ = "project_assignments"
    __table_args__ = (UniqueConstraint("project_id", "user_id", name="uq_project_assignment"),)
    
    id = Column(String(64), primary_key=True, index=True)
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    role = Column(String, nullable=True)
    assigned_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    
    project = relationship("Project", back_populates="assignments")
