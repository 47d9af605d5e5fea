from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from showtime.db.session import get_db
from showtime.api.deps import get_current_manager_user
from showtime.api.errors import to_http
from showtime.core.errors import ShowtimeError
from showtime.models.user import User
from showtime.schemas.common import ErrorResponse
from showtime.schemas.show import (
    ShowCreate,
    Show as ShowSchema,
    ScheduleEntry,
    HallScheduleResponse,
    DeleteShowResponse,
)
from showtime.services import shows as show_service

router = APIRouter(prefix="/admin/theaters", tags=["Admin - Shows"])


# ---------------------------------------------------------------------------
# Show CRUD (nested under theaters)
# ---------------------------------------------------------------------------


@router.post(
    "/{theater_id}/shows",
    response_model=ShowSchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def create_show(
    theater_id: int,
    data: ShowCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    """
    Schedule a movie in one of the theater's halls.
    - 409 when the hall is already occupied during the requested time.
    - 422 when the window is shorter than the movie or outside the scheduling horizon.
    """
    try:
        show = show_service.create_show(db, current_user, theater_id, data)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return ShowSchema.from_model(show)


@router.delete("/{theater_id}/shows/{show_id}", response_model=DeleteShowResponse)
def delete_show(
    theater_id: int,
    show_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        show_service.delete_show(db, current_user, theater_id, show_id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return DeleteShowResponse(message="Deleted Successfully")


# ---------------------------------------------------------------------------
# Hall schedule — see what's booked in a hall over a time window
# ---------------------------------------------------------------------------


@router.get("/{theater_id}/halls/{code}/schedule", response_model=HallScheduleResponse)
def get_hall_schedule(
    theater_id: int,
    code: str,
    date_from: Optional[datetime] = Query(None, description="Window start (defaults to now)"),
    date_to: Optional[datetime] = Query(None, description="Window end (defaults to the scheduling horizon)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        hall, schedule = show_service.hall_schedule(
            db, current_user, theater_id, code, date_from=date_from, date_to=date_to
        )
    except ShowtimeError as exc:
        raise to_http(exc) from exc

    return HallScheduleResponse(
        hall_id=hall.id,
        hall_code=hall.code,
        hall_name=hall.name,
        window_start=schedule.window_start,
        window_end=schedule.window_end,
        shows=[ScheduleEntry.model_validate(s) for s in schedule.shows],
    )
