from pydantic import BaseModel, Field
from typing import Optional

class ReminderSettingsUpdate(BaseModel):
    email: Optional[str] = Field(None, max_length=254)
    time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    enabled: Optional[bool] = None
    timezone: Optional[str] = None

class ReminderSettingsResponse(BaseModel):
    id: str
    email: str
    time: str
    enabled: bool
    timezone: str

    model_config = {"from_attributes": True}

class MessageResponse(BaseModel):
    message: str
