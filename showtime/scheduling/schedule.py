"""Value types the scheduler works on.

Nothing here touches the database: repositories build these from rows and
the scheduler only ever reads them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Half-open interval overlap: [a_start, a_end) and [b_start, b_end).

    Touching endpoints (a_end == b_start) do not overlap.
    """
    return a_start < b_end and b_start < a_end


@dataclass(frozen=True)
class ScheduledShow:
    hall_id: int
    movie_id: int
    start_time: datetime
    end_time: datetime
    id: Optional[int] = None
    movie_title: Optional[str] = None

    def __post_init__(self):
        if not self.start_time < self.end_time:
            raise ValueError("show start_time must be before end_time")


@dataclass(frozen=True)
class Candidate:
    """A proposed show that has not been committed yet."""

    hall_id: int
    movie_id: int
    start_time: datetime
    end_time: datetime

    def __post_init__(self):
        if not self.start_time < self.end_time:
            raise ValueError("candidate start_time must be before end_time")

    @property
    def duration(self):
        return self.end_time - self.start_time


@dataclass(frozen=True)
class Schedule:
    """Read-only snapshot of one hall's shows within [window_start, window_end)."""

    hall_id: int
    window_start: datetime
    window_end: datetime
    shows: Tuple[ScheduledShow, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.window_start < self.window_end:
            raise ValueError("schedule window_start must be before window_end")
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "shows", tuple(self.shows))
        for show in self.shows:
            if show.hall_id != self.hall_id:
                raise ValueError(f"show {show.id} belongs to hall {show.hall_id}, not {self.hall_id}")
            if not overlaps(show.start_time, show.end_time, self.window_start, self.window_end):
                raise ValueError(f"show {show.id} lies outside the schedule window")

    def covers(self, start: datetime, end: datetime) -> bool:
        return self.window_start <= start and end <= self.window_end
