"""SQLAlchemy model for volunteer participation history."""

from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime


class VolunteerHistoryModel(Base):
    """Event snapshot recorded when a volunteer is assigned.

    ``event_id`` is not a foreign key: the row copies the event
    fields and must stay readable whatever happens to the event afterwards.
    """

    __tablename__ = "volunteer_history"
    __table_args__ = (
        UniqueConstraint("user_id", "event_id", name="uq_volunteer_history_user_event"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id = Column(Integer, nullable=False, index=True)
    event_name = Column(String(100), nullable=False)
    event_description = Column(Text, nullable=False)
    event_location = Column(String(255), nullable=False)
    required_skills = Column(JSON, nullable=False, default=list)
    urgency = Column(String(20), nullable=False)
    event_date = Column(Date, nullable=False)
    start_time = Column(String(8), nullable=True)
    end_time = Column(String(8), nullable=True)
    status = Column(String(20), nullable=False, default="upcoming")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["VolunteerHistoryModel"]
