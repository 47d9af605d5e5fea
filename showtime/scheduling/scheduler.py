import logging
from datetime import timedelta

from showtime.core.errors import InsufficientDuration, OutOfRange, ShowConflict
from showtime.scheduling.schedule import Candidate, Schedule, ScheduledShow, overlaps

logger = logging.getLogger(__name__)


def validate_window_bounds(schedule: Schedule, candidate: Candidate) -> None:
    """Raise OutOfRange unless the candidate lies inside the loaded window.

    Shows outside the window are invisible to the snapshot, so a candidate
    reaching past it could hide a real conflict.
    """
    if not schedule.covers(candidate.start_time, candidate.end_time):
        raise OutOfRange(
            candidate.start_time,
            candidate.end_time,
            schedule.window_start,
            schedule.window_end,
        )


def is_free(schedule: Schedule, candidate: Candidate) -> None:
    """Raise ShowConflict for the first stored show overlapping the candidate."""
    for show in schedule.shows:
        if overlaps(show.start_time, show.end_time, candidate.start_time, candidate.end_time):
            raise ShowConflict(show)


def validate_duration(candidate: Candidate, movie_duration: timedelta) -> None:
    """Raise InsufficientDuration if the reserved window is shorter than the film."""
    if candidate.duration < movie_duration:
        raise InsufficientDuration(candidate.duration, movie_duration)


def place_show(schedule: Schedule, candidate: Candidate, movie_duration: timedelta) -> ScheduledShow:
    """
    Validate a candidate against a hall schedule and return the show to persist.

    Checks run in order:
      1. window bounds  (a conflict test on an incomplete window is meaningless)
      2. duration       (a too-short booking is invalid whatever the hall holds)
      3. collisions

    The schedule is never modified; writing the show is the repository's job.
    """
    validate_window_bounds(schedule, candidate)
    validate_duration(candidate, movie_duration)
    is_free(schedule, candidate)

    logger.debug(
        "Hall %s is free from %s to %s", candidate.hall_id, candidate.start_time, candidate.end_time
    )
    return ScheduledShow(
        hall_id=candidate.hall_id,
        movie_id=candidate.movie_id,
        start_time=candidate.start_time,
        end_time=candidate.end_time,
    )
