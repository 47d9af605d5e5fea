import logging
from typing import List

from sqlalchemy.orm import Session

from showtime.core.errors import Forbidden
from showtime.models.hall import Hall
from showtime.models.theater import Theater
from showtime.models.user import User
from showtime.repositories import halls, theaters
from showtime.schemas.theater import HallCreate, HallUpdate, TheaterCreate, TheaterUpdate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Theaters
# ---------------------------------------------------------------------------


def create_theater(db: Session, user: User, data: TheaterCreate) -> Theater:
    """The creating manager becomes the theater's manager."""
    if not user.is_manager_or_admin:
        raise Forbidden("creating theaters is available for managers only")
    return theaters.create(db, Theater(manager_id=user.id, **data.model_dump()))


def update_theater(db: Session, user: User, theater_id: int, data: TheaterUpdate) -> Theater:
    theater = theaters.find(db, theater_id)
    if not theaters.can_manage(user, theater):
        raise Forbidden("theater info can be updated by theater manager only")
    return theaters.update(db, theater, data.model_dump(exclude_unset=True, exclude_none=True))


def delete_theater(db: Session, user: User, theater_id: int) -> Theater:
    theater = theaters.find(db, theater_id)
    if not theaters.can_manage(user, theater):
        raise Forbidden("theater can be deleted by theater manager only")
    theaters.delete(db, theater)
    logger.info("User %s deleted theater %s", user.id, theater_id)
    return theater


# ---------------------------------------------------------------------------
# Halls
# ---------------------------------------------------------------------------


def create_hall(db: Session, user: User, theater_id: int, data: HallCreate) -> Hall:
    """Raises NotFound (theater), Forbidden, or Duplicate when the code is taken."""
    theater = theaters.find(db, theater_id)
    if not theaters.can_manage(user, theater):
        raise Forbidden("creating halls is available for theater's manager only")
    return halls.create(db, Hall(theater_id=theater.id, **data.model_dump()))


def list_halls(db: Session, user: User, theater_id: int) -> List[Hall]:
    theater = theaters.find(db, theater_id)
    if not theaters.can_manage(user, theater):
        raise Forbidden("halls are listed for theater's manager only")
    return halls.list_for_theater(db, theater.id)


def update_hall(db: Session, user: User, hall_id: int, data: HallUpdate) -> Hall:
    hall = halls.find(db, hall_id)
    if not halls.can_schedule(user, hall):
        raise Forbidden("halls can be updated by theater manager only")
    return halls.update(db, hall, data.model_dump(exclude_unset=True, exclude_none=True))


def delete_hall(db: Session, user: User, hall_id: int) -> Hall:
    hall = halls.find(db, hall_id)
    if not halls.can_schedule(user, hall):
        raise Forbidden("hall can be removed only by the theater manager")
    halls.delete(db, hall)
    return hall
