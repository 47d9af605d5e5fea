import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from showtime.core.config import settings
from showtime.core.errors import Forbidden, InvalidWindow, NotFound
from showtime.models.show import Show
from showtime.models.user import User
from showtime.repositories import halls, movies, shows, theaters
from showtime.scheduling import Candidate, Schedule, place_show
from showtime.schemas.show import ShowCreate
from showtime.utils.dates import as_utc, utcnow

logger = logging.getLogger(__name__)


def scheduling_window(now: Optional[datetime] = None):
    """The [from, to) range new shows may be placed in."""
    start = as_utc(now) if now else utcnow()
    return start, start + timedelta(days=settings.SCHEDULE_HORIZON_DAYS)


def create_show(
    db: Session,
    user: User,
    theater_id: int,
    data: ShowCreate,
    now: Optional[datetime] = None,
) -> Show:
    """
    Schedule a movie in one of the theater's halls.

    Raises NotFound (hall or movie), Forbidden, OutOfRange,
    InsufficientDuration or ShowConflict. The final overlap check happens
    again at insert time, under a lock on the hall.
    """
    hall = halls.find_by_code(db, theater_id, data.hall_code)
    if not halls.can_schedule(user, hall):
        raise Forbidden("creating shows is available for theater's manager only")

    runtime = movies.get_runtime(db, data.movie_id)

    window_start, window_end = scheduling_window(now)
    schedule = shows.load_schedule(db, hall.id, window_start, window_end)

    candidate = Candidate(
        hall_id=hall.id,
        movie_id=data.movie_id,
        start_time=data.start_time,
        end_time=data.end_time,
    )
    placed = place_show(schedule, candidate, runtime)
    return shows.insert(db, placed)


def get_show(db: Session, theater_id: int, show_id: int) -> Show:
    show = shows.find(db, show_id)
    # Don't reveal shows of other theaters through this theater's URL
    if show.hall.theater_id != theater_id or not show.hall.is_active:
        raise NotFound("show not found")
    return show


def delete_show(db: Session, user: User, theater_id: int, show_id: int) -> None:
    theater = theaters.find(db, theater_id)
    if not theaters.can_manage(user, theater):
        raise Forbidden("deleting shows is available for theater's manager only")

    get_show(db, theater_id, show_id)
    shows.delete(db, show_id)
    logger.info("User %s deleted show %s of theater %s", user.id, show_id, theater_id)


def hall_schedule(
    db: Session,
    user: User,
    theater_id: int,
    code: str,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
):
    """
    Return the hall and its schedule, by default over the scheduling horizon.

    Raises InvalidWindow when the resulting window is empty, e.g. only
    `date_to` is given and it is not after now.
    """
    hall = halls.find_by_code(db, theater_id, code)
    if not halls.can_schedule(user, hall):
        raise Forbidden("hall schedules are available for theater's manager only")

    default_start, default_end = scheduling_window()
    window_start = as_utc(date_from) if date_from else default_start
    window_end = as_utc(date_to) if date_to else window_start + (default_end - default_start)
    if window_end <= window_start:
        raise InvalidWindow(
            f"date_to ({window_end.isoformat()}) must be after date_from ({window_start.isoformat()})"
        )
    schedule: Schedule = shows.load_schedule(db, hall.id, window_start, window_end)
    return hall, schedule
