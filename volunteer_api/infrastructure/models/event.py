"""SQLAlchemy model for volunteering events."""

from sqlalchemy import JSON, Column, Date, DateTime, Integer, String, Text, Time

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime


class EventModel(Base):
    """Database representation of an admin-created event."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    event_name = Column(String(100), nullable=False)
    event_description = Column(Text, nullable=False)
    event_location = Column(String(255), nullable=False)
    required_skills = Column(JSON, nullable=False, default=list)
    urgency = Column(String(20), nullable=False)
    event_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["EventModel"]
