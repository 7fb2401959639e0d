"""
Error translation for the HTTP layer.
Maps domain error codes to status codes and catches anything that escapes a route.
"""

import logging
import traceback
from typing import Any, Dict

from fastapi import HTTPException, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from workportal.application.use_cases.base_use_case import UseCaseResult
from workportal.config import get_settings
from workportal.domain.models.base import DomainException


logger = logging.getLogger(__name__)


ERROR_STATUS_MAP: Dict[str, int] = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "PROFILE_NOT_PROVISIONED": status.HTTP_403_FORBIDDEN,
    "INVALID_STATE": status.HTTP_409_CONFLICT,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UPSTREAM_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "PROFILE_PROVISIONING_FAILED": status.HTTP_502_BAD_GATEWAY,
    "AUTHENTICATION_FAILED": status.HTTP_401_UNAUTHORIZED,
}

ERROR_TITLES: Dict[int, str] = {
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    status.HTTP_502_BAD_GATEWAY: "Bad Gateway",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}


def status_for(code: str) -> int:
    return ERROR_STATUS_MAP.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _headers_for(code: str, status_code: int) -> Dict[str, str]:
    headers = {"X-Error-Code": code}
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers["WWW-Authenticate"] = "Bearer"
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        headers["Retry-After"] = "5"
    return headers


def unwrap_result(result: UseCaseResult) -> Any:
    """Return the data of a successful result or raise the matching HTTPException."""
    if result.success:
        return result.data

    code = result.error_code or "UNKNOWN_ERROR"
    status_code = status_for(code)
    raise HTTPException(
        status_code=status_code,
        detail=result.error or "An unexpected error occurred",
        headers=_headers_for(code, status_code),
    )


def error_body(code: str, message: str, status_code: int) -> Dict[str, Any]:
    return {
        "error": ERROR_TITLES.get(status_code, "Internal Server Error"),
        "code": code,
        "message": message,
        "status_code": status_code,
    }


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Domain exceptions raised outside a use case, e.g. from auth dependencies."""
    status_code = status_for(exc.code)
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.code, exc.message, status_code),
        headers=_headers_for(exc.code, status_code),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return self.handle_exception(request, exc)

    def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        if isinstance(exc, DomainException):
            status_code = status_for(exc.code)
            content = error_body(exc.code, exc.message, status_code)
        else:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                },
            )
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            content = error_body("UNKNOWN_ERROR", "An unexpected error occurred", status_code)

        request_id = getattr(request.state, "request_id", None)
        if request_id:
            content["request_id"] = request_id

        if get_settings().debug and not isinstance(exc, DomainException):
            content["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n"),
            }

        return JSONResponse(status_code=status_code, content=content)
