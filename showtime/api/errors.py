import logging

from fastapi import HTTPException, status

from showtime.core.errors import (
    Duplicate,
    Forbidden,
    InvalidWindow,
    NotFound,
    RepositoryError,
    SchedulingError,
    ShowConflict,
    ShowtimeError,
)

logger = logging.getLogger(__name__)


def to_http(exc: ShowtimeError) -> HTTPException:
    """Map a domain error to the HTTPException returned to the client."""
    if isinstance(exc, (ShowConflict, Duplicate)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, SchedulingError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    if isinstance(exc, InvalidWindow):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, Forbidden):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))

    # RepositoryError and anything unexpected: keep internals server-side
    if isinstance(exc, RepositoryError):
        logger.error("Internal server error: %s", exc, exc_info=exc)
    else:
        logger.error("Unhandled domain error: %s", exc, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Something went wrong",
    )
