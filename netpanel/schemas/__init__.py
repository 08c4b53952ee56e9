from netpanel.schemas.activity import ActivityLogFilter, ActivityLogResponse
from netpanel.schemas.common import SuccessResponse
from netpanel.schemas.device import (
    ActiveUserResponse,
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
    InterfaceTrafficResponse,
    MonitoringResponse,
)
from netpanel.schemas.radius import (
    RadiusProfileCreate,
    RadiusProfileResponse,
    RadiusProfileUpdate,
    RadiusUserCreate,
    RadiusUserResponse,
    RadiusUserUpdate,
)
from netpanel.schemas.system import HealthResponse

__all__ = [
    "ActivityLogFilter", "ActivityLogResponse",
    "SuccessResponse",
    "ActiveUserResponse", "DeviceCreate", "DeviceResponse", "DeviceUpdate",
    "InterfaceTrafficResponse", "MonitoringResponse",
    "RadiusProfileCreate", "RadiusProfileResponse", "RadiusProfileUpdate",
    "RadiusUserCreate", "RadiusUserResponse", "RadiusUserUpdate",
    "HealthResponse",
]
