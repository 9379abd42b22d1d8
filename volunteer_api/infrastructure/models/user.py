"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an account that can sign in."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="volunteer")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    profile = relationship(
        "ProfileModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]
