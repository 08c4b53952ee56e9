import enum

from sqlalchemy import Column, Enum, Integer, String, Text

from netpanel.database import Base
from netpanel.models.types import DecimalText, UTCDateTime, utcnow


class RadiusUserStatus(str, enum.Enum):
    active = "active"
    suspended = "suspended"
    expired = "expired"


class RadiusProfile(Base):
    __tablename__ = "radius_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    upload_speed = Column(Integer, nullable=False)  # kbps
    download_speed = Column(Integer, nullable=False)  # kbps
    session_timeout = Column(Integer, nullable=True)  # seconds
    idle_timeout = Column(Integer, nullable=True)  # seconds
    monthly_quota = Column(Integer, nullable=True)  # MB
    price = Column(DecimalText(10, 2), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)


class RadiusUser(Base):
    __tablename__ = "radius_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    # Delete of a referenced profile is refused by the service layer.
    profile_id = Column(Integer, nullable=False, index=True)
    full_name = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    status = Column(
        Enum(RadiusUserStatus, name="radius_user_status"),
        nullable=False,
        default=RadiusUserStatus.active,
    )
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
    expires_at = Column(UTCDateTime(), nullable=True)
