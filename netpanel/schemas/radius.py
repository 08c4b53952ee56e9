from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from netpanel.models.radius import RadiusUserStatus
from netpanel.schemas.common import MAX_INT, MoneyValue, PartialUpdate, SecretValue


class RadiusProfileCreate(BaseModel):
    name: str = Field(..., min_length=1)
    upload_speed: int = Field(..., ge=0, le=MAX_INT)  # kbps
    download_speed: int = Field(..., ge=0, le=MAX_INT)  # kbps
    session_timeout: Optional[int] = Field(None, ge=0, le=MAX_INT)
    idle_timeout: Optional[int] = Field(None, ge=0, le=MAX_INT)
    monthly_quota: Optional[int] = Field(None, ge=0, le=MAX_INT)  # MB
    price: Optional[MoneyValue] = None
    description: Optional[str] = None


class RadiusProfileUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("name", "upload_speed", "download_speed")

    name: Optional[str] = Field(None, min_length=1)
    upload_speed: Optional[int] = Field(None, ge=0, le=MAX_INT)
    download_speed: Optional[int] = Field(None, ge=0, le=MAX_INT)
    session_timeout: Optional[int] = Field(None, ge=0, le=MAX_INT)
    idle_timeout: Optional[int] = Field(None, ge=0, le=MAX_INT)
    monthly_quota: Optional[int] = Field(None, ge=0, le=MAX_INT)
    price: Optional[MoneyValue] = None
    description: Optional[str] = None


class RadiusProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    upload_speed: int
    download_speed: int
    session_timeout: Optional[int] = None
    idle_timeout: Optional[int] = None
    monthly_quota: Optional[int] = None
    price: Optional[MoneyValue] = None
    description: Optional[str] = None
    created_at: datetime


class RadiusUserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: SecretValue
    profile_id: int = Field(..., ge=1, le=MAX_INT)
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    expires_at: Optional[datetime] = None


class RadiusUserUpdate(PartialUpdate):
    non_nullable: ClassVar[tuple[str, ...]] = ("password", "profile_id", "status")

    password: Optional[SecretValue] = None
    profile_id: Optional[int] = Field(None, ge=1, le=MAX_INT)
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: Optional[RadiusUserStatus] = None
    expires_at: Optional[datetime] = None


class RadiusUserResponse(BaseModel):
    """Subscriber account; neither the secret nor its hash is exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    profile_id: int
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: RadiusUserStatus
    created_at: datetime
    expires_at: Optional[datetime] = None
