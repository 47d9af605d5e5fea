from showtime.scheduling.schedule import Candidate, Schedule, ScheduledShow, overlaps
from showtime.scheduling.scheduler import (
    is_free,
    place_show,
    validate_duration,
    validate_window_bounds,
)
