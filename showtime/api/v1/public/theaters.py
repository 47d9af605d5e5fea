from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from showtime.db.session import get_db
from showtime.api.errors import to_http
from showtime.core.errors import ShowtimeError
from showtime.repositories import halls as hall_repository
from showtime.repositories import theaters as theater_repository
from showtime.schemas.common import PaginatedResponse
from showtime.schemas.theater import (
    Theater as TheaterSchema,
    TheaterListItem,
    Hall as HallSchema,
)

router = APIRouter(prefix="/theaters", tags=["Theaters"])

SortBy = Literal["name", "-name", "city", "-city"]


@router.get("/", response_model=PaginatedResponse[TheaterListItem])
def search_theaters(
    name: Optional[str] = Query(None, max_length=50),
    city: Optional[str] = Query(None, max_length=30),
    sort_by: Optional[SortBy] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Search active theaters by name or city. Newest first unless sort_by is given."""
    try:
        theaters, total = theater_repository.search(
            db, name=name, city=city, sort_by=sort_by, page=page, limit=limit
        )
    except ShowtimeError as exc:
        raise to_http(exc) from exc

    return PaginatedResponse(
        data=[TheaterListItem.model_validate(t) for t in theaters],
        total=total,
        page=page,
        limit=limit,
        total_pages=-(-total // limit) if total else 0,
    )


@router.get("/{theater_id}", response_model=TheaterSchema)
def get_theater(
    theater_id: int,
    db: Session = Depends(get_db),
):
    try:
        theater = theater_repository.find(db, theater_id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return TheaterSchema.from_model(theater)


@router.get("/{theater_id}/halls/{code}", response_model=HallSchema)
def get_hall(
    theater_id: int,
    code: str,
    db: Session = Depends(get_db),
):
    try:
        return hall_repository.find_by_code(db, theater_id, code)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
