import enum

from sqlalchemy import Column, Enum, Integer, String, Text

from netpanel.database import Base
from netpanel.models.types import DecimalText, UTCDateTime, utcnow


class DeviceStatus(str, enum.Enum):
    online = "online"
    offline = "offline"
    error = "error"


class SessionStatus(str, enum.Enum):
    active = "active"
    idle = "idle"
    disabled = "disabled"


class MikrotikDevice(Base):
    __tablename__ = "mikrotik_devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    ip_address = Column(String(255), nullable=False)
    username = Column(Text, nullable=False)
    password = Column(Text, nullable=False)  # RouterOS API login, kept usable
    port = Column(Integer, nullable=False, default=8728)
    status = Column(Enum(DeviceStatus, name="device_status"), nullable=False, default=DeviceStatus.offline)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime(), nullable=False, default=utcnow)


# Telemetry rows reference devices by id only; no foreign key.


class MikrotikMonitoring(Base):
    __tablename__ = "mikrotik_monitoring"

    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, nullable=False, index=True)
    cpu_usage = Column(DecimalText(5, 2), nullable=False)  # percent
    ram_usage = Column(DecimalText(10, 2), nullable=False)  # MB
    total_ram = Column(DecimalText(10, 2), nullable=False)  # MB
    uptime = Column(Text, nullable=False)
    recorded_at = Column(UTCDateTime(), nullable=False, default=utcnow)


class InterfaceTraffic(Base):
    __tablename__ = "interface_traffic"

    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, nullable=False, index=True)
    interface_name = Column(Text, nullable=False)
    rx_bytes = Column(DecimalText(20), nullable=False)
    tx_bytes = Column(DecimalText(20), nullable=False)
    rx_packets = Column(DecimalText(20), nullable=False)
    tx_packets = Column(DecimalText(20), nullable=False)
    recorded_at = Column(UTCDateTime(), nullable=False, default=utcnow)


class ActiveUser(Base):
    __tablename__ = "active_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    device_id = Column(Integer, nullable=False, index=True)
    username = Column(Text, nullable=False)  # as reported by the device, not a radius_users FK
    ip_address = Column(String(255), nullable=False)
    mac_address = Column(String(64), nullable=True)
    session_time = Column(Text, nullable=False)
    bytes_in = Column(DecimalText(20), nullable=False)
    bytes_out = Column(DecimalText(20), nullable=False)
    status = Column(Enum(SessionStatus, name="user_status"), nullable=False, default=SessionStatus.active)
    last_seen = Column(UTCDateTime(), nullable=False, default=utcnow)
