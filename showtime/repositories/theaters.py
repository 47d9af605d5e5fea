import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from showtime.core.errors import NotFound, RepositoryError
from showtime.models.hall import Hall
from showtime.models.theater import Theater

logger = logging.getLogger(__name__)

# sort_by value -> (column, descending)
SORT_COLUMNS = {
    "name": (Theater.name, False),
    "-name": (Theater.name, True),
    "city": (Theater.city, False),
    "-city": (Theater.city, True),
}


def find(db: Session, theater_id: int) -> Theater:
    try:
        theater = (
            db.query(Theater)
            .filter(Theater.id == theater_id, Theater.is_active == True)  # noqa: E712
            .first()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch theater %s", theater_id)
        raise RepositoryError(f"failed to fetch theater {theater_id}") from exc

    if not theater:
        raise NotFound("theater not found")
    return theater


def search(
    db: Session,
    name: Optional[str] = None,
    city: Optional[str] = None,
    sort_by: Optional[str] = None,
    page: int = 1,
    limit: int = 20,
) -> Tuple[List[Theater], int]:
    try:
        query = db.query(Theater).filter(Theater.is_active == True)  # noqa: E712
        if name:
            query = query.filter(Theater.name.ilike(f"%{name}%"))
        if city:
            query = query.filter(Theater.city.ilike(f"%{city}%"))

        if sort_by in SORT_COLUMNS:
            column, descending = SORT_COLUMNS[sort_by]
            query = query.order_by(column.desc() if descending else column, Theater.id)
        else:
            query = query.order_by(Theater.created_at.desc(), Theater.id.desc())

        total = query.count()
        theaters = query.offset((page - 1) * limit).limit(limit).all()
    except SQLAlchemyError as exc:
        logger.exception("Theater search failed")
        raise RepositoryError("theater search failed") from exc

    return theaters, total


def create(db: Session, theater: Theater) -> Theater:
    try:
        db.add(theater)
        db.commit()
        db.refresh(theater)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create theater %r", theater.name)
        raise RepositoryError("failed to create theater") from exc

    logger.info("Created theater %s managed by user %s", theater.id, theater.manager_id)
    return theater


def update(db: Session, theater: Theater, changes: dict) -> Theater:
    for field, value in changes.items():
        setattr(theater, field, value)
    try:
        db.commit()
        db.refresh(theater)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update theater %s", theater.id)
        raise RepositoryError(f"failed to update theater {theater.id}") from exc
    return theater


def delete(db: Session, theater: Theater) -> None:
    """Soft-delete the theater together with all of its halls."""
    try:
        theater.is_active = False
        db.query(Hall).filter(Hall.theater_id == theater.id, Hall.is_active == True).update(  # noqa: E712
            {"is_active": False}, synchronize_session="fetch"
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete theater %s", theater.id)
        raise RepositoryError(f"failed to delete theater {theater.id}") from exc

    logger.info("Deleted theater %s", theater.id)


def can_manage(user, theater: Theater) -> bool:
    return user.is_admin or theater.manager_id == user.id
