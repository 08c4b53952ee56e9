from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from netpanel.database import get_db
from netpanel.schemas.common import MAX_INT
from netpanel.schemas.device import (
    ActiveUserResponse,
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
    InterfaceTrafficResponse,
    MonitoringResponse,
)
from netpanel.services import device_service, monitoring_service
from netpanel.services.device_service import DeviceProbe

router = APIRouter(prefix="/api/devices", tags=["devices"])

DeviceId = Annotated[int, Path(ge=1, le=MAX_INT)]


def get_device_probe() -> DeviceProbe:
    return device_service.routeros_probe


@router.get("", response_model=list[DeviceResponse])
def list_devices(db: Session = Depends(get_db)):
    return device_service.list_devices(db)


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def register_device(body: DeviceCreate, db: Session = Depends(get_db)):
    return device_service.register_device(db, body)


@router.put("/{device_id}", response_model=DeviceResponse)
def update_device(device_id: DeviceId, body: DeviceUpdate, db: Session = Depends(get_db)):
    return device_service.update_device(db, device_id, body)


@router.post("/{device_id}/refresh-status", response_model=DeviceResponse)
def refresh_device_status(
    device_id: DeviceId,
    db: Session = Depends(get_db),
    probe: DeviceProbe = Depends(get_device_probe),
):
    return device_service.refresh_device_status(db, device_id, probe)


@router.get("/{device_id}/monitoring", response_model=list[MonitoringResponse])
def device_monitoring(device_id: DeviceId, db: Session = Depends(get_db)):
    return monitoring_service.list_monitoring(db, device_id)


@router.get("/{device_id}/interface-traffic", response_model=list[InterfaceTrafficResponse])
def interface_traffic(device_id: DeviceId, db: Session = Depends(get_db)):
    return monitoring_service.list_interface_traffic(db, device_id)


@router.get("/{device_id}/active-users", response_model=list[ActiveUserResponse])
def active_users(device_id: DeviceId, db: Session = Depends(get_db)):
    return monitoring_service.list_active_users(db, device_id)
