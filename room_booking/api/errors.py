"""
Mapping of service error kinds to HTTP responses.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import AuthenticationError
from ..core.models import ErrorKind, ServiceResult

STATUS_BY_KIND = {
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.RESOURCE_UNAVAILABLE: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def error_body(kind: ErrorKind, message: str) -> dict:
    return {"error": kind.value, "detail": message}


def error_response(result: ServiceResult) -> JSONResponse:
    """Render a failed ServiceResult."""
    return JSONResponse(
        status_code=STATUS_BY_KIND[result.error],
        content=error_body(result.error, result.message or ""),
    )


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(ErrorKind.UNAUTHORIZED, str(exc)),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same 400 shape as service validation errors."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ErrorKind.VALIDATION_ERROR, "; ".join(problems) or "Invalid request."),
    )
