from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from netpanel.config import settings
from netpanel.database import get_db
from netpanel.models.activity import ActivityAction
from netpanel.schemas.activity import ActivityLogFilter, ActivityLogResponse
from netpanel.schemas.common import MAX_INT
from netpanel.services import activity_log

router = APIRouter(prefix="/api/activity-logs", tags=["activity"])


@router.get("", response_model=list[ActivityLogResponse])
def query_activity_logs(
    db: Session = Depends(get_db),
    username: Optional[str] = Query(None),
    action: Optional[ActivityAction] = Query(None),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    limit: int = Query(100, ge=1, le=settings.activity_log_max_limit),
    offset: int = Query(0, ge=0, le=MAX_INT),
):
    flt = ActivityLogFilter(
        username=username,
        action=action,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return activity_log.query(db, flt)
