from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from netpanel.models.activity import ActivityAction
from netpanel.schemas.common import MAX_INT, CounterValue


class ActivityLogFilter(BaseModel):
    username: Optional[str] = None
    action: Optional[ActivityAction] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    limit: int = Field(100, ge=1)
    offset: int = Field(0, ge=0, le=MAX_INT)


class ActivityLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    username: str
    action: ActivityAction
    ip_address: Optional[str] = None
    mac_address: Optional[str] = None
    bytes_in: Optional[CounterValue] = None
    bytes_out: Optional[CounterValue] = None
    session_duration: Optional[int] = None
    created_at: datetime
