from showtime.schemas.common import PaginatedResponse, ErrorResponse
from showtime.schemas.show import (
    Show, ShowCreate, ScheduleEntry, HallScheduleResponse, DeleteShowResponse,
)
from showtime.schemas.theater import (
    Theater, TheaterCreate, TheaterUpdate, TheaterListItem,
    Hall, HallCreate, HallUpdate, DeleteResponse,
)
