from pydantic import BaseModel, Field
from datetime import date
from typing import Optional
from goal_tracker.core.dates import DATE_PATTERN
from goal_tracker.schemas.goal import camel_config

class LogUpsert(BaseModel):
    date: str = Field(..., pattern=DATE_PATTERN)
    goal_id: str = Field(..., min_length=1)
    completed: bool = False
    notes: Optional[str] = None

    model_config = camel_config

class LogResponse(BaseModel):
    id: str
    date: date
    goal_id: str
    completed: bool
    notes: Optional[str]

    model_config = {**camel_config, "from_attributes": True}

class ChecklistEntry(BaseModel):
    """One scheduled goal for a date, with that date's log laid over it."""
    goal_id: str
    name: str
    category: str
    target_count: int
    target_period: str
    icon: Optional[str] = None
    color: Optional[str] = None
    completed: bool = False
    notes: str = ""
    log_id: Optional[str] = None

    model_config = camel_config
