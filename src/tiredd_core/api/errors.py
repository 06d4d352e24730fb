"""Mapping from core failures to HTTP responses."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse

from tiredd_core.core.errors import (
    CoreError,
    DuplicateVoteError,
    InvalidContentError,
    InvalidCredentialsError,
    InvalidParentError,
    NotFoundError,
    TransientStoreError,
    UnauthenticatedError,
)

STATUS_BY_ERROR: dict[type[CoreError], int] = {
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidContentError: status.HTTP_400_BAD_REQUEST,
    InvalidParentError: status.HTTP_400_BAD_REQUEST,
    DuplicateVoteError: status.HTTP_409_CONFLICT,
    TransientStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: CoreError) -> int:
    """Return the HTTP status for a core failure."""
    return STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


async def core_error_handler(request: Request, exc: CoreError) -> JSONResponse:
    """Render a core failure as ``{"detail": reason}``."""
    return JSONResponse(status_code=status_for(exc), content={"detail": exc.reason})
