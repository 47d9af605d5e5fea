import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from showtime.core.errors import NotFound, RepositoryError, ShowConflict
from showtime.models.hall import Hall
from showtime.models.movie import Movie
from showtime.models.show import Show
from showtime.models.theater import Theater
from showtime.scheduling.schedule import Schedule, ScheduledShow
from showtime.utils.dates import as_utc

logger = logging.getLogger(__name__)

# sort_by value -> (column, descending)
SORT_COLUMNS = {
    "movie_title": (Movie.title, False),
    "-movie_title": (Movie.title, True),
    "theater_name": (Theater.name, False),
    "-theater_name": (Theater.name, True),
    "theater_city": (Theater.city, False),
    "-theater_city": (Theater.city, True),
    "date": (Show.start_time, False),
    "-date": (Show.start_time, True),
}


def to_scheduled(show: Show, movie_title: Optional[str] = None) -> ScheduledShow:
    return ScheduledShow(
        id=show.id,
        hall_id=show.hall_id,
        movie_id=show.movie_id,
        movie_title=movie_title,
        start_time=as_utc(show.start_time),
        end_time=as_utc(show.end_time),
    )


def _overlapping(db: Session, hall_id: int, start: datetime, end: datetime):
    """Shows in the hall whose [start_time, end_time) intersects [start, end)."""
    return (
        db.query(Show, Movie.title)
        .join(Movie, Movie.id == Show.movie_id)
        .filter(
            Show.hall_id == hall_id,
            Show.start_time < end,
            Show.end_time > start,
        )
        .order_by(Show.start_time, Show.id)
    )


def load_schedule(db: Session, hall_id: int, window_start: datetime, window_end: datetime) -> Schedule:
    """Snapshot of every show in `hall_id` intersecting [window_start, window_end)."""
    window_start, window_end = as_utc(window_start), as_utc(window_end)
    try:
        rows = _overlapping(db, hall_id, window_start, window_end).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to load schedule for hall %s", hall_id)
        raise RepositoryError(f"failed to load schedule for hall {hall_id}") from exc

    return Schedule(
        hall_id=hall_id,
        window_start=window_start,
        window_end=window_end,
        shows=[to_scheduled(show, title) for show, title in rows],
    )


def insert(db: Session, scheduled: ScheduledShow) -> Show:
    """
    Persist a validated show.

    This is where double booking is actually prevented. The hall row is locked
    (``SELECT ... FOR UPDATE``) so concurrent inserts into the same hall run one
    after another, and the overlap query is repeated inside that transaction.
    A show committed by a racing request after our schedule was loaded
    surfaces here as ShowConflict.
    """
    start, end = as_utc(scheduled.start_time), as_utc(scheduled.end_time)
    try:
        hall = (
            db.query(Hall)
            .filter(Hall.id == scheduled.hall_id, Hall.is_active == True)  # noqa: E712
            .with_for_update()
            .first()
        )
        if not hall:
            db.rollback()
            raise NotFound(f"hall {scheduled.hall_id} not found")

        clash = _overlapping(db, scheduled.hall_id, start, end).first()
        if clash:
            db.rollback()
            existing, title = clash
            logger.info(
                "Rejected show in hall %s: overlaps show %s", scheduled.hall_id, existing.id
            )
            raise ShowConflict(to_scheduled(existing, title))

        show = Show(
            hall_id=scheduled.hall_id,
            movie_id=scheduled.movie_id,
            start_time=start,
            end_time=end,
        )
        db.add(show)
        db.commit()
        db.refresh(show)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to insert show into hall %s", scheduled.hall_id)
        raise RepositoryError("failed to insert show") from exc

    logger.info("Scheduled show %s in hall %s from %s to %s", show.id, show.hall_id, start, end)
    return show


def find(db: Session, show_id: int) -> Show:
    try:
        show = (
            db.query(Show)
            .options(joinedload(Show.movie), joinedload(Show.hall))
            .filter(Show.id == show_id)
            .first()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch show %s", show_id)
        raise RepositoryError(f"failed to fetch show {show_id}") from exc

    if not show:
        raise NotFound("show not found")
    return show


def delete(db: Session, show_id: int) -> None:
    try:
        deleted = db.query(Show).filter(Show.id == show_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete show %s", show_id)
        raise RepositoryError(f"failed to delete show {show_id}") from exc

    if deleted == 0:
        raise NotFound("show not found")


def search(
    db: Session,
    start_date: datetime,
    end_date: datetime,
    movie_title: Optional[str] = None,
    theater_name: Optional[str] = None,
    theater_city: Optional[str] = None,
    sort_by: Optional[str] = None,
    page: int = 1,
    limit: int = 20,
) -> Tuple[List[Show], int]:
    """Upcoming shows starting inside (start_date, end_date), with the total match count."""
    column, descending = SORT_COLUMNS.get(sort_by or "date", SORT_COLUMNS["date"])
    ordering = [column.desc() if descending else column, Show.id]

    try:
        query = (
            db.query(Show)
            .join(Movie, Movie.id == Show.movie_id)
            .join(Hall, Hall.id == Show.hall_id)
            .join(Theater, Theater.id == Hall.theater_id)
            .options(joinedload(Show.movie), joinedload(Show.hall).joinedload(Hall.theater))
            .filter(
                Hall.is_active == True,  # noqa: E712
                Theater.is_active == True,  # noqa: E712
                Show.start_time > as_utc(start_date),
                Show.start_time < as_utc(end_date),
            )
        )

        if movie_title:
            query = query.filter(Movie.title.ilike(f"%{movie_title}%"))
        if theater_name:
            query = query.filter(Theater.name.ilike(f"%{theater_name}%"))
        if theater_city:
            query = query.filter(Theater.city.ilike(f"%{theater_city}%"))

        total = query.count()
        shows = query.order_by(*ordering).offset((page - 1) * limit).limit(limit).all()
    except SQLAlchemyError as exc:
        logger.exception("Show search failed")
        raise RepositoryError("show search failed") from exc

    return shows, total
