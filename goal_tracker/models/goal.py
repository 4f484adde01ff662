import uuid
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Date, ForeignKey, UniqueConstraint, func
from goal_tracker.database import Base

def new_id() -> str:
    return uuid.uuid4().hex

class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, default="personal")   # icon/color lookup, not validated
    goal_type = Column(String, nullable=False, default="boolean")    # boolean, count
    target_count = Column(Integer, nullable=False)
    target_period = Column(String, nullable=False)                   # day, week, month, year
    icon = Column(String, nullable=True)
    color = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

class GoalLog(Base):
    __tablename__ = "goal_logs"

    id = Column(String(32), primary_key=True, default=new_id)
    date = Column(Date, nullable=False, index=True)  # calendar day, no time-of-day
    goal_id = Column(String(32), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("date", "goal_id", name="uq_goal_log_date_goal"),
    )
