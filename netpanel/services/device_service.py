"""Device registry: registration, partial updates and status refresh."""
import logging
from typing import Callable

from routeros_api import RouterOsApiPool
from routeros_api.exceptions import RouterOsApiConnectionError
from sqlalchemy.orm import Session

from netpanel.config import settings
from netpanel.errors import NotFound
from netpanel.models.device import DeviceStatus, MikrotikDevice
from netpanel.models.types import utcnow
from netpanel.schemas.device import DeviceCreate, DeviceUpdate

logger = logging.getLogger(__name__)

# Returns whether the device answered; raising means the probe itself failed.
DeviceProbe = Callable[[MikrotikDevice], bool]


def routeros_probe(device: MikrotikDevice) -> bool:
    """Log in to the device's RouterOS API with its stored credentials.

    An API port that cannot be reached means the device is offline. A rejected
    login or any other API failure is raised to the caller.
    """
    pool = RouterOsApiPool(
        device.ip_address,
        username=device.username,
        password=device.password,
        port=device.port,
        plaintext_login=True,
    )
    pool.set_timeout(settings.device_probe_timeout)
    try:
        pool.get_api()
    except RouterOsApiConnectionError:
        return False
    finally:
        pool.disconnect()
    return True


def _get_device(db: Session, device_id: int) -> MikrotikDevice:
    device = db.get(MikrotikDevice, device_id)
    if not device:
        raise NotFound(f"Device with id {device_id} not found")
    return device


def list_devices(db: Session) -> list[MikrotikDevice]:
    return db.query(MikrotikDevice).order_by(MikrotikDevice.id).all()


def register_device(db: Session, payload: DeviceCreate) -> MikrotikDevice:
    now = utcnow()
    device = MikrotikDevice(
        name=payload.name,
        ip_address=payload.ip_address,
        username=payload.username,
        password=payload.password,
        port=payload.port,
        # unverified until the first refresh
        status=DeviceStatus.offline,
        created_at=now,
        updated_at=now,
    )
    db.add(device)
    db.commit()
    db.refresh(device)
    logger.info("Device %s registered at %s:%s (id=%s)", device.name, device.ip_address, device.port, device.id)
    return device


def update_device(db: Session, device_id: int, payload: DeviceUpdate) -> MikrotikDevice:
    device = _get_device(db, device_id)
    for key, value in payload.changes().items():
        setattr(device, key, value)
    device.updated_at = utcnow()
    db.commit()
    db.refresh(device)
    return device


def refresh_device_status(db: Session, device_id: int, probe: DeviceProbe = routeros_probe) -> MikrotikDevice:
    device = _get_device(db, device_id)
    try:
        status = DeviceStatus.online if probe(device) else DeviceStatus.offline
    except Exception as exc:
        logger.warning("Status probe for device %s (%s:%s) failed: %s", device.id, device.ip_address, device.port, exc)
        status = DeviceStatus.error
    if status != device.status:
        logger.info("Device %s status %s -> %s", device.id, device.status.value, status.value)
    device.status = status
    device.updated_at = utcnow()
    db.commit()
    db.refresh(device)
    return device
