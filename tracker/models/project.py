from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from ..db import Base
from ..core.stamps import utcnow
from ..enums import ProjectStatus, EffortLevel


class Project(Base):
    """
    Represents projects tracked by a business.
    Each project is associated with a specific business for multi-tenant isolation,
    and its status decides which kanban column it sits in.
    """
    __tablename__ = "projects"
    
    id = Column(String(64), primary_key=True, index=True)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    created_by = Column(String, nullable=False)
    project_name = Column(String, nullable=False, index=True)
    project_description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True)
    target_completion_date = Column(Date, nullable=True)
    status = Column(
        Enum(
            ProjectStatus,
            name="project_status",
            values_callable=lambda e: [m.value for m in e],
            validate_strings=True,
        ),
        nullable=False,
        default=ProjectStatus.TODO,
        index=True,
    )
    project_owner = Column(String, nullable=True)
    support_management_resource = Column(String, nullable=True)
    support_role = Column(String, nullable=True)
    effort_level = Column(
        Enum(
            EffortLevel,
            name="effort_level",
            values_callable=lambda e: [m.value for m in e],
            validate_strings=True,
        ),
        nullable=False,
        default=EffortLevel.MEDIUM,
    )
    time_commitment_per_week = Column(Integer, nullable=True)  # Hours per week
    project_docs_links = Column(Text, nullable=True)
    expected_outcomes = Column(Text, nullable=True)
    training_needed = Column(Text, nullable=True)
    tool_process_change = Column(Text, nullable=True)
    meeting_cadence = Column(String, nullable=True)
    comm_channel = Column(String, nullable=True)
    escalation_path = Column(Text, nullable=True)
    dependencies = Column(Text, nullable=True)
    key_milestones = Column(Text, nullable=True)
    risks_blockers = Column(Text, nullable=True)
    action_items = Column(Text, nullable=True)
    latest_update = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    
    business = relationship("Business", back_populates="projects")
    assignments = relationship("ProjectAssignment", back_populates="project", cascade="all, delete-orphan")
