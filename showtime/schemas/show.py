from typing import Optional, List
from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime

from showtime.utils.dates import as_utc


# Show — Create (POST /admin/theaters/{theater_id}/shows)
class ShowCreate(BaseModel):
    movie_id: int
    hall_code: str = Field(min_length=1, max_length=10, pattern=r"^[A-Za-z0-9]+$")
    start_time: datetime
    end_time: datetime

    # Naive timestamps are read as UTC
    @field_validator("start_time", "end_time")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _check_range(self):
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


# Show — response
class Show(BaseModel):
    id: int
    theater_id: int
    hall_id: int
    hall_code: str
    movie_id: int
    movie_title: str
    start_time: datetime
    end_time: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, show) -> "Show":
        return cls(
            id=show.id,
            theater_id=show.hall.theater_id,
            hall_id=show.hall_id,
            hall_code=show.hall.code,
            movie_id=show.movie_id,
            movie_title=show.movie.title,
            start_time=as_utc(show.start_time),
            end_time=as_utc(show.end_time),
            created_at=as_utc(show.created_at),
            updated_at=as_utc(show.updated_at),
        )


# One show inside a hall schedule
class ScheduleEntry(BaseModel):
    id: int
    movie_id: int
    movie_title: Optional[str] = None
    start_time: datetime
    end_time: datetime

    class Config:
        from_attributes = True


# Response for GET /admin/theaters/{theater_id}/halls/{code}/schedule
class HallScheduleResponse(BaseModel):
    hall_id: int
    hall_code: str
    hall_name: str
    window_start: datetime
    window_end: datetime
    shows: List[ScheduleEntry]


class DeleteShowResponse(BaseModel):
    message: str
