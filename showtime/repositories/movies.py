import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from showtime.core.errors import NotFound, RepositoryError
from showtime.models.movie import Movie

logger = logging.getLogger(__name__)


def get_runtime(db: Session, movie_id: int) -> timedelta:
    """Canonical running time of a movie from the local catalogue."""
    try:
        movie = db.query(Movie).filter(Movie.id == movie_id).first()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch movie %s", movie_id)
        raise RepositoryError(f"failed to fetch movie {movie_id}") from exc

    if not movie:
        raise NotFound("movie not found")
    if not movie.runtime_minutes:
        # Without a runtime the booking window can't be validated
        raise NotFound(f"runtime of movie {movie_id} is unknown")
    return timedelta(minutes=movie.runtime_minutes)
