from sqlalchemy import Column, String, DateTime
from ..db import Base
from ..core.stamps import utcnow

class User(Base):
    """
    Authenticated identity. Business membership and role live on the
    UserProfile, which is created the first time the identity signs in.
    """
    __tablename__ = "users"
    
    id = Column(String(64), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    display_name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
