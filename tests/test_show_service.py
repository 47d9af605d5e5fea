from datetime import datetime

import pytest

from conftest import add_show, utc
from showtime.core.errors import (
    Forbidden, InsufficientDuration, InvalidWindow, NotFound, OutOfRange, ShowConflict,
)
from showtime.schemas.show import ShowCreate
from showtime.services import shows as show_service

NOW = utc(2025, 12, 5)


def request(seed, start, end, hall_code="A1", movie=None):
    return ShowCreate(
        movie_id=(movie or seed["movie"]).id,
        hall_code=hall_code,
        start_time=start,
        end_time=end,
    )


@pytest.fixture
def booked(db, seed):
    """Shows from the Dec-5 scenario: [Dec-6 12:00, 15:00) and [Dec-6 23:00, Dec-7 02:00)."""
    add_show(db, seed["hall"], seed["movie"], utc(2025, 12, 6, 12), utc(2025, 12, 6, 15))
    add_show(db, seed["hall"], seed["movie"], utc(2025, 12, 6, 23), utc(2025, 12, 7, 2))
    return seed


def test_conflicting_show(db, booked):
    with pytest.raises(ShowConflict):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2025, 12, 6, 14), utc(2025, 12, 6, 17)), now=NOW,
        )


def test_free_slot_is_created(db, booked):
    show = show_service.create_show(
        db, booked["manager"], booked["theater"].id,
        request(booked, utc(2025, 12, 5, 3), utc(2025, 12, 5, 6)), now=NOW,
    )
    assert show.id is not None
    assert show.hall_id == booked["hall"].id


def test_before_window_is_out_of_range(db, booked):
    with pytest.raises(OutOfRange):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2025, 12, 4, 22), utc(2025, 12, 5, 1)), now=NOW,
        )


def test_beyond_horizon_is_out_of_range(db, booked):
    with pytest.raises(OutOfRange):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2026, 2, 1, 12), utc(2026, 2, 1, 15)), now=NOW,
        )


def test_window_shorter_than_movie(db, booked):
    with pytest.raises(InsufficientDuration):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2025, 12, 8, 12), utc(2025, 12, 8, 14)), now=NOW,
        )


def test_touching_existing_show_is_accepted(db, booked):
    show = show_service.create_show(
        db, booked["manager"], booked["theater"].id,
        request(booked, utc(2025, 12, 6, 15), utc(2025, 12, 6, 18)), now=NOW,
    )
    assert show.id is not None


def test_admin_may_schedule_in_any_hall(db, booked):
    show = show_service.create_show(
        db, booked["admin"], booked["theater"].id,
        request(booked, utc(2025, 12, 9, 12), utc(2025, 12, 9, 15)), now=NOW,
    )
    assert show.id is not None


def test_other_manager_is_forbidden(db, booked):
    with pytest.raises(Forbidden):
        show_service.create_show(
            db, booked["other"], booked["theater"].id,
            request(booked, utc(2025, 12, 9, 12), utc(2025, 12, 9, 15)), now=NOW,
        )


def test_unknown_hall_and_movie(db, booked):
    with pytest.raises(NotFound):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2025, 12, 9, 12), utc(2025, 12, 9, 15), hall_code="Z9"), now=NOW,
        )
    with pytest.raises(NotFound):
        show_service.create_show(
            db, booked["manager"], booked["theater"].id,
            request(booked, utc(2025, 12, 9, 12), utc(2025, 12, 9, 15), movie=booked["untimed"]), now=NOW,
        )


def test_get_show_is_scoped_to_theater(db, booked):
    show = show_service.create_show(
        db, booked["manager"], booked["theater"].id,
        request(booked, utc(2025, 12, 9, 12), utc(2025, 12, 9, 15)), now=NOW,
    )
    assert show_service.get_show(db, booked["theater"].id, show.id).id == show.id
    with pytest.raises(NotFound):
        show_service.get_show(db, booked["theater"].id + 1, show.id)


def test_delete_show_requires_theater_manager(db, booked):
    show = add_show(db, booked["hall"], booked["movie"], utc(2025, 12, 9, 12), utc(2025, 12, 9, 15))

    with pytest.raises(Forbidden):
        show_service.delete_show(db, booked["other"], booked["theater"].id, show.id)

    show_service.delete_show(db, booked["manager"], booked["theater"].id, show.id)
    with pytest.raises(NotFound):
        show_service.get_show(db, booked["theater"].id, show.id)


def test_hall_schedule_window(db, booked):
    hall, schedule = show_service.hall_schedule(
        db, booked["manager"], booked["theater"].id, "A1",
        date_from=utc(2025, 12, 6), date_to=utc(2025, 12, 7),
    )
    assert hall.code == "A1"
    assert len(schedule.shows) == 2
    assert schedule.window_end == utc(2025, 12, 7)


def test_hall_schedule_with_past_date_to_only(db, booked):
    # The window would start now and end before it
    with pytest.raises(InvalidWindow):
        show_service.hall_schedule(
            db, booked["manager"], booked["theater"].id, "A1", date_to=utc(2020, 1, 1),
        )


def test_hall_schedule_reversed_window(db, booked):
    with pytest.raises(InvalidWindow):
        show_service.hall_schedule(
            db, booked["manager"], booked["theater"].id, "A1",
            date_from=utc(2025, 12, 7), date_to=utc(2025, 12, 6),
        )


def test_hall_schedule_mixes_naive_and_aware_bounds(db, booked):
    hall, schedule = show_service.hall_schedule(
        db, booked["manager"], booked["theater"].id, "A1",
        date_from=datetime(2025, 12, 6), date_to=utc(2025, 12, 7),
    )
    assert schedule.window_start == utc(2025, 12, 6)
    assert len(schedule.shows) == 2


def test_get_show_of_deleted_hall(db, booked):
    show = add_show(db, booked["hall"], booked["movie"], utc(2025, 12, 9, 12), utc(2025, 12, 9, 15))
    booked["hall"].is_active = False
    db.commit()

    with pytest.raises(NotFound):
        show_service.get_show(db, booked["theater"].id, show.id)
