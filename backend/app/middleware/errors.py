"""
Roster API - Global Error Middleware
====================================

What:  The single catch-all around request handling.
How:   Wraps call_next in try/except. Anything that escaped the typed
       exception handlers registered in main.py lands here:

           ValueError (argument error) → 400 {"Error": "Bad Request", "Message": ...}
           any other Exception         → 500 {"Error": "Internal Server Error", "Message": ...}

When:  Inside RequestLoggingMiddleware, so the access log records the
       final status code produced here.

Note:
    Typed errors (ValidationError, NotFoundError, request validation) never
    reach this middleware: Starlette's ExceptionMiddleware sits closer to the
    router and converts them first.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.middleware.request_id import request_id_var
from app.schemas.user import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build the {Error, Message} body shared by the catch-all and request validation."""
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Converts unhandled exceptions into structured JSON error responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except ValueError as exc:
            logger.warning(
                "[%s] Error 400 on %s %s: %s",
                request_id_var.get(""), request.method, request.url.path, exc,
            )
            return error_response(400, "Bad Request", str(exc))
        except Exception as exc:
            logger.error(
                "[%s] Error 500 on %s %s: %s",
                request_id_var.get(""), request.method, request.url.path, exc,
                exc_info=True,
            )
            return error_response(500, "Internal Server Error", str(exc))
