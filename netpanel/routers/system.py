from datetime import datetime, timezone

from fastapi import APIRouter

from netpanel.schemas.system import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(timestamp=datetime.now(timezone.utc))
