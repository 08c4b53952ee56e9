from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from netpanel.config import settings
from netpanel.models.device import DeviceStatus, SessionStatus
from netpanel.schemas.common import CounterValue, NumericValue, PartialUpdate


class DeviceCreate(BaseModel):
    name: str = Field(..., min_length=1)
    ip_address: str = Field(..., min_length=1, max_length=255)
    username: str = Field(..., min_length=1)
    password: str
    port: int = Field(default_factory=lambda: settings.default_device_port, ge=1, le=65535)


class DeviceUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("name", "ip_address", "username", "password", "port", "status")

    name: Optional[str] = Field(None, min_length=1)
    ip_address: Optional[str] = Field(None, min_length=1, max_length=255)
    username: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = None
    port: Optional[int] = Field(None, ge=1, le=65535)
    status: Optional[DeviceStatus] = None


class DeviceResponse(BaseModel):
    """Device record; the RouterOS password is never sent back."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    ip_address: str
    username: str
    port: int
    status: DeviceStatus
    created_at: datetime
    updated_at: datetime


class MonitoringResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    cpu_usage: NumericValue
    ram_usage: NumericValue
    total_ram: NumericValue
    uptime: str
    recorded_at: datetime


class InterfaceTrafficResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    interface_name: str
    rx_bytes: CounterValue
    tx_bytes: CounterValue
    rx_packets: CounterValue
    tx_packets: CounterValue
    recorded_at: datetime


class ActiveUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    device_id: int
    username: str
    ip_address: str
    mac_address: Optional[str] = None
    session_time: str
    bytes_in: CounterValue
    bytes_out: CounterValue
    status: SessionStatus
    last_seen: datetime
