# goal_tracker/models/reminder.py
from sqlalchemy import Column, String, Boolean, DateTime, func
from goal_tracker.database import Base

# Only one settings row ever exists
SETTINGS_ID = "default"

class ReminderSettings(Base):
    __tablename__ = "reminder_settings"

    id = Column(String(32), primary_key=True, default=SETTINGS_ID)
    email = Column(String, nullable=False, default="")
    time = Column(String, nullable=False, default="08:30")  # HH:MM
    enabled = Column(Boolean, nullable=False, default=True)
    timezone = Column(String, nullable=False, default="America/Los_Angeles")
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
