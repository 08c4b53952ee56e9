import enum

from sqlalchemy import Column, Enum, Integer, String, Text

from netpanel.database import Base
from netpanel.models.types import DecimalText, UTCDateTime, utcnow


class ActivityAction(str, enum.Enum):
    login = "login"
    logout = "logout"
    session_start = "session_start"
    session_end = "session_end"
    account_created = "account_created"
    account_updated = "account_updated"
    account_suspended = "account_suspended"


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Weak reference to radius_users.id; nulled when the account is removed.
    user_id = Column(Integer, nullable=True, index=True)
    username = Column(Text, nullable=False)  # snapshot at event time
    action = Column(Enum(ActivityAction, name="activity_action"), nullable=False)
    ip_address = Column(String(255), nullable=True)
    mac_address = Column(String(64), nullable=True)
    bytes_in = Column(DecimalText(20), nullable=True)
    bytes_out = Column(DecimalText(20), nullable=True)
    session_duration = Column(Integer, nullable=True)  # seconds
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow, index=True)
