"""Domain errors and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NetpanelError(Exception):
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(NetpanelError):
    """The entity addressed by the operation does not exist."""

    status_code = 404
    code = "not_found"


class ReferenceNotFound(NetpanelError):
    """A foreign entity referenced by the payload does not exist."""

    status_code = 404
    code = "reference_not_found"


class Conflict(NetpanelError):
    """Uniqueness violation or deletion blocked by dependents."""

    status_code = 409
    code = "conflict"


class ValidationError(NetpanelError):
    status_code = 422
    code = "validation_error"


class AuditLogError(NetpanelError):
    """The activity log write failed after the primary mutation was stored."""

    status_code = 500
    code = "audit_log_error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NetpanelError)
    async def netpanel_error_handler(request: Request, exc: NetpanelError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
        )
