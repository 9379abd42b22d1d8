"""SQLAlchemy model for volunteer profiles."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime


class ProfileModel(Base):
    """One row per user holding contact data, skills and availability."""

    __tablename__ = "volunteer_profile"

    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
    )
    full_name = Column(String(50), nullable=False)
    address1 = Column(String(100), nullable=False)
    address2 = Column(String(100), nullable=True)
    city = Column(String(100), nullable=False)
    state = Column(String(2), nullable=False)
    zip = Column(String(9), nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    preferences = Column(Text, nullable=True)
    availability = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    user = relationship("UserModel", back_populates="profile", lazy="joined")


__all__ = ["ProfileModel"]
