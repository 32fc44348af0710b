from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from ..db import Base
from ..core.stamps import utcnow

class Business(Base):
    __tablename__ = "businesses"
    
    id = Column(String(64), primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    
    profiles = relationship("UserProfile", back_populates="business")
    projects = relationship("Project", back_populates="business")
