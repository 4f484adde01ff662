from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

# JSON on the wire is camelCase; Python attributes stay snake_case.
camel_config = {"alias_generator": to_camel, "populate_by_name": True}

class GoalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    category: str = "personal"
    goal_type: str = Field("boolean", pattern="^(boolean|count)$")
    target_count: int = Field(..., ge=1)
    target_period: str = Field(..., pattern="^(day|week|month|year)$")
    icon: Optional[str] = None
    color: Optional[str] = None

    model_config = camel_config

class GoalUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = None
    goal_type: Optional[str] = Field(None, pattern="^(boolean|count)$")
    target_count: Optional[int] = Field(None, ge=1)
    target_period: Optional[str] = Field(None, pattern="^(day|week|month|year)$")
    icon: Optional[str] = None
    color: Optional[str] = None

    model_config = camel_config

class GoalResponse(BaseModel):
    id: str
    name: str
    category: str
    goal_type: str
    target_count: int
    target_period: str
    icon: Optional[str]
    color: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {**camel_config, "from_attributes": True}
