"""Read side of the polled telemetry tables.

Rows are written by the poller; this module only serves them. An unknown device
id yields an empty list.
"""
from sqlalchemy import desc
from sqlalchemy.orm import Session

from netpanel.models.device import ActiveUser, InterfaceTraffic, MikrotikMonitoring


def list_monitoring(db: Session, device_id: int) -> list[MikrotikMonitoring]:
    return (
        db.query(MikrotikMonitoring)
        .filter(MikrotikMonitoring.device_id == device_id)
        .order_by(desc(MikrotikMonitoring.recorded_at), desc(MikrotikMonitoring.id))
        .all()
    )


def list_interface_traffic(db: Session, device_id: int) -> list[InterfaceTraffic]:
    return (
        db.query(InterfaceTraffic)
        .filter(InterfaceTraffic.device_id == device_id)
        .order_by(desc(InterfaceTraffic.recorded_at), desc(InterfaceTraffic.id))
        .all()
    )


def list_active_users(db: Session, device_id: int) -> list[ActiveUser]:
    return (
        db.query(ActiveUser)
        .filter(ActiveUser.device_id == device_id)
        .order_by(desc(ActiveUser.last_seen), desc(ActiveUser.id))
        .all()
    )
