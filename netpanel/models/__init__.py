from netpanel.database import Base
from netpanel.models.activity import ActivityAction, ActivityLog
from netpanel.models.device import (
    ActiveUser,
    DeviceStatus,
    InterfaceTraffic,
    MikrotikDevice,
    MikrotikMonitoring,
    SessionStatus,
)
from netpanel.models.radius import RadiusProfile, RadiusUser, RadiusUserStatus

__all__ = [
    "Base",
    "ActivityAction", "ActivityLog",
    "ActiveUser", "DeviceStatus", "InterfaceTraffic", "MikrotikDevice", "MikrotikMonitoring", "SessionStatus",
    "RadiusProfile", "RadiusUser", "RadiusUserStatus",
]
