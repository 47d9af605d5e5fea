import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from showtime.core.errors import Duplicate, NotFound, RepositoryError
from showtime.models.hall import Hall
from showtime.models.user import User
from showtime.repositories import theaters

logger = logging.getLogger(__name__)


def _active_halls(db: Session):
    return db.query(Hall).options(joinedload(Hall.theater)).filter(Hall.is_active == True)  # noqa: E712


def find(db: Session, hall_id: int) -> Hall:
    try:
        hall = _active_halls(db).filter(Hall.id == hall_id).first()
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch hall %s", hall_id)
        raise RepositoryError(f"failed to fetch hall {hall_id}") from exc

    if not hall:
        raise NotFound("hall not found")
    return hall


def find_by_code(db: Session, theater_id: int, code: str) -> Hall:
    """Halls are addressed by their code within the owning theater."""
    try:
        hall = (
            _active_halls(db)
            .filter(Hall.theater_id == theater_id, Hall.code == code)
            .first()
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch hall %s of theater %s", code, theater_id)
        raise RepositoryError(f"failed to fetch hall {code}") from exc

    if not hall:
        raise NotFound(f"hall {code} not found")
    return hall


def list_for_theater(db: Session, theater_id: int) -> List[Hall]:
    try:
        return _active_halls(db).filter(Hall.theater_id == theater_id).order_by(Hall.code).all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to list halls of theater %s", theater_id)
        raise RepositoryError(f"failed to list halls of theater {theater_id}") from exc


def create(db: Session, hall: Hall) -> Hall:
    """
    Insert a hall. Codes are unique per theater (halls_theater_id_code_key),
    including codes of deleted halls.
    """
    duplicate = Duplicate(f"hall with code {hall.code} already exists")
    try:
        taken = (
            db.query(Hall.id)
            .filter(Hall.theater_id == hall.theater_id, Hall.code == hall.code)
            .first()
        )
        if taken:
            raise duplicate

        db.add(hall)
        db.commit()
        db.refresh(hall)
    except IntegrityError as exc:
        # A concurrent insert took the code between the check and the commit
        db.rollback()
        raise duplicate from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to create hall %s in theater %s", hall.code, hall.theater_id)
        raise RepositoryError("failed to create hall") from exc

    logger.info("Created hall %s (%s) in theater %s", hall.id, hall.code, hall.theater_id)
    return hall


def update(db: Session, hall: Hall, changes: dict) -> Hall:
    for field, value in changes.items():
        setattr(hall, field, value)
    try:
        db.commit()
        db.refresh(hall)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to update hall %s", hall.id)
        raise RepositoryError(f"failed to update hall {hall.id}") from exc
    return hall


def delete(db: Session, hall: Hall) -> None:
    try:
        hall.is_active = False
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to delete hall %s", hall.id)
        raise RepositoryError(f"failed to delete hall {hall.id}") from exc

    logger.info("Deleted hall %s of theater %s", hall.id, hall.theater_id)


def can_schedule(user: User, hall: Hall) -> bool:
    """Only the manager of the hall's theater, or an admin, may add shows to it."""
    return theaters.can_manage(user, hall.theater)
