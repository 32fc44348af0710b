from sqlalchemy import Column, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from ..db import Base
from ..core.stamps import utcnow
from ..enums import UserRole


class UserProfile(Base):
    """
    Per-identity profile tying a user to one business with a role.
    user_id holds the identity id, or an email for profiles provisioned by an
    admin before the person has signed in.
    """
    __tablename__ = "user_profiles"
    
    id = Column(String(64), primary_key=True, index=True)
    user_id = Column(String, unique=True, nullable=False, index=True)
    business_id = Column(String(64), ForeignKey("businesses.id"), nullable=False, index=True)
    role = Column(
        Enum(
            UserRole,
            name="user_role",
            values_callable=lambda e: [m.value for m in e],
            validate_strings=True,
        ),
        nullable=False,
        default=UserRole.STAFF,
    )
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    
    business = relationship("Business", back_populates="profiles")
