"""Domain exceptions shared by the scheduler, repositories and services.

Validation outcomes (``SchedulingError`` subclasses) carry messages that are
safe to return to the caller verbatim. ``RepositoryError`` wraps database
faults and must never be shown to users as-is.
"""


class ShowtimeError(Exception):
    """Base class for every error raised by the showtime package."""


class SchedulingError(ShowtimeError):
    """A candidate show cannot be placed in the hall's schedule."""


class OutOfRange(SchedulingError):
    """The candidate is not fully covered by the loaded schedule window."""

    def __init__(self, start, end, window_start, window_end):
        self.start = start
        self.end = end
        self.window_start = window_start
        self.window_end = window_end
        super().__init__(
            f"show must be scheduled between {window_start.isoformat()} "
            f"and {window_end.isoformat()}"
        )


class ShowConflict(SchedulingError):
    """The candidate overlaps a show already scheduled in the hall."""

    def __init__(self, show):
        self.show = show
        label = show.movie_title or f"movie {show.movie_id}"
        super().__init__(
            f"contradiction with screening of {label} "
            f"from {show.start_time.isoformat()} to {show.end_time.isoformat()}"
        )


class InsufficientDuration(SchedulingError):
    """The reserved window is shorter than the movie's running time."""

    def __init__(self, requested, required):
        self.requested = requested
        self.required = required
        minutes = int(required.total_seconds() // 60)
        super().__init__(
            f"movie duration is longer than reserved time (duration = {minutes} min)"
        )


class NotFound(ShowtimeError):
    pass


class Forbidden(ShowtimeError):
    pass


class RepositoryError(ShowtimeError):
    """Persistence layer failure. Log it, never return its text to users."""


class InvalidWindow(ShowtimeError):
    """A requested time window is empty or reversed."""


class Duplicate(ShowtimeError):
    pass
