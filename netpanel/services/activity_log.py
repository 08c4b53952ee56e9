"""Append-only activity log for subscriber accounts."""
import logging
from typing import Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from netpanel.config import settings
from netpanel.errors import AuditLogError, ValidationError
from netpanel.models.activity import ActivityAction, ActivityLog
from netpanel.models.types import utcnow
from netpanel.schemas.activity import ActivityLogFilter

logger = logging.getLogger(__name__)


def _coerce_action(action) -> ActivityAction:
    try:
        return ActivityAction(action)
    except ValueError:
        raise ValidationError(f"Unknown activity action {action}") from None


def build_entry(
    *,
    action,
    username: str,
    user_id: Optional[int] = None,
    ip_address: Optional[str] = None,
    mac_address: Optional[str] = None,
    bytes_in: Optional[int] = None,
    bytes_out: Optional[int] = None,
    session_duration: Optional[int] = None,
) -> ActivityLog:
    """Unsaved entry stamped with the server clock."""
    return ActivityLog(
        user_id=user_id,
        username=username,
        action=_coerce_action(action),
        ip_address=ip_address,
        mac_address=mac_address,
        bytes_in=bytes_in,
        bytes_out=bytes_out,
        session_duration=session_duration,
        created_at=utcnow(),
    )


def append(db: Session, **fields) -> ActivityLog:
    """Insert and commit one entry.

    A failed write is rolled back and raised as AuditLogError; whatever the
    caller committed before stays committed.
    """
    entry = build_entry(**fields)
    db.add(entry)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Activity log write failed for %s (%s)", entry.username, entry.action.value)
        raise AuditLogError(f"Failed to write activity log for {entry.username}") from exc
    db.refresh(entry)
    return entry


def query(db: Session, flt: Optional[ActivityLogFilter] = None) -> list[ActivityLog]:
    flt = flt or ActivityLogFilter()
    if flt.limit > settings.activity_log_max_limit:
        raise ValidationError(f"limit must be at most {settings.activity_log_max_limit}")
    q = db.query(ActivityLog)
    if flt.username is not None:
        q = q.filter(ActivityLog.username == flt.username)
    if flt.action is not None:
        q = q.filter(ActivityLog.action == flt.action)
    if flt.start_date is not None:
        q = q.filter(ActivityLog.created_at >= flt.start_date)
    if flt.end_date is not None:
        q = q.filter(ActivityLog.created_at <= flt.end_date)
    return (
        q.order_by(desc(ActivityLog.created_at), desc(ActivityLog.id))
        .offset(flt.offset)
        .limit(flt.limit)
        .all()
    )
