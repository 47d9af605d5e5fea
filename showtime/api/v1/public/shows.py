from datetime import date, datetime, time, timedelta, timezone
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from showtime.db.session import get_db
from showtime.api.errors import to_http
from showtime.core.config import settings
from showtime.core.errors import ShowtimeError
from showtime.repositories import shows as show_repository
from showtime.schemas.common import PaginatedResponse
from showtime.schemas.show import Show as ShowSchema
from showtime.services import shows as show_service
from showtime.utils.dates import utcnow

router = APIRouter(tags=["Shows"])

SortBy = Literal[
    "movie_title", "-movie_title",
    "theater_name", "-theater_name",
    "theater_city", "-theater_city",
    "date", "-date",
]


def _day_start(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


@router.get("/shows", response_model=PaginatedResponse[ShowSchema])
def search_shows(
    movie_title: Optional[str] = Query(None, max_length=100),
    theater_name: Optional[str] = Query(None, max_length=50),
    theater_city: Optional[str] = Query(None, max_length=30),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    sort_by: Optional[SortBy] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """
    Search upcoming shows by movie or theater.
    The window starts at start_date (default now) and ends at end_date, or
    SEARCH_DEFAULT_DAYS days after its start.
    """
    window_start = _day_start(start_date) if start_date else utcnow()
    window_end = (
        _day_start(end_date)
        if end_date
        else window_start + timedelta(days=settings.SEARCH_DEFAULT_DAYS)
    )
    if window_end <= window_start:
        raise HTTPException(status_code=400, detail="end_date must be after start_date")

    try:
        shows, total = show_repository.search(
            db,
            start_date=window_start,
            end_date=window_end,
            movie_title=movie_title,
            theater_name=theater_name,
            theater_city=theater_city,
            sort_by=sort_by,
            page=page,
            limit=limit,
        )
    except ShowtimeError as exc:
        raise to_http(exc) from exc

    return PaginatedResponse(
        data=[ShowSchema.from_model(s) for s in shows],
        total=total,
        page=page,
        limit=limit,
        total_pages=-(-total // limit) if total else 0,
    )


@router.get("/theaters/{theater_id}/shows/{show_id}", response_model=ShowSchema)
def get_show(
    theater_id: int,
    show_id: int,
    db: Session = Depends(get_db),
):
    try:
        show = show_service.get_show(db, theater_id, show_id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return ShowSchema.from_model(show)
