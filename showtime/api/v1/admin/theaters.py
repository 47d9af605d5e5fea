from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from showtime.db.session import get_db
from showtime.api.deps import get_current_manager_user
from showtime.api.errors import to_http
from showtime.core.errors import ShowtimeError
from showtime.models.user import User
from showtime.schemas.common import ErrorResponse
from showtime.schemas.theater import (
    TheaterCreate,
    TheaterUpdate,
    Theater as TheaterSchema,
    HallCreate,
    HallUpdate,
    Hall as HallSchema,
    DeleteResponse,
)
from showtime.services import theaters as theater_service

router = APIRouter(prefix="/admin/theaters", tags=["Admin - Theaters"])
hall_router = APIRouter(prefix="/admin/halls", tags=["Admin - Halls"])


# ---------------------------------------------------------------------------
# Theater CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=TheaterSchema, status_code=status.HTTP_201_CREATED)
def create_theater(
    data: TheaterCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        theater = theater_service.create_theater(db, current_user, data)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return TheaterSchema.from_model(theater)


@router.patch("/{id}", response_model=TheaterSchema)
def update_theater(
    id: int,
    data: TheaterUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        theater = theater_service.update_theater(db, current_user, id, data)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return TheaterSchema.from_model(theater)


@router.delete("/{id}", response_model=DeleteResponse)
def delete_theater(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    """Soft-delete the theater and all of its halls."""
    try:
        theater_service.delete_theater(db, current_user, id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return DeleteResponse(id=id, is_active=False)


# ---------------------------------------------------------------------------
# Hall CRUD (nested under theaters for create/list, flat for update/delete)
# ---------------------------------------------------------------------------


@router.post(
    "/{theater_id}/halls",
    response_model=HallSchema,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def create_hall(
    theater_id: int,
    data: HallCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    """409 when the theater already has a hall with this code."""
    try:
        return theater_service.create_hall(db, current_user, theater_id, data)
    except ShowtimeError as exc:
        raise to_http(exc) from exc


@router.get("/{theater_id}/halls", response_model=list[HallSchema])
def list_halls(
    theater_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        return theater_service.list_halls(db, current_user, theater_id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc


@hall_router.patch("/{id}", response_model=HallSchema)
def update_hall(
    id: int,
    data: HallUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        return theater_service.update_hall(db, current_user, id, data)
    except ShowtimeError as exc:
        raise to_http(exc) from exc


@hall_router.delete("/{id}", response_model=DeleteResponse)
def delete_hall(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_manager_user),
):
    try:
        theater_service.delete_hall(db, current_user, id)
    except ShowtimeError as exc:
        raise to_http(exc) from exc
    return DeleteResponse(id=id, is_active=False)
