import os

# Keep the application engine off PostgreSQL while tests import it
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from showtime.core.security import create_access_token
from showtime.db.base import Base, User, Theater, Hall, Movie, Show
from showtime.db.session import get_db
from showtime.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def seed(db):
    """A theater with one hall, its manager, an admin, an outsider and a 2h10m movie."""
    manager = User(email="manager@example.com", full_name="Hall Manager", role="manager")
    other = User(email="other@example.com", full_name="Other Manager", role="manager")
    admin = User(email="admin@example.com", full_name="Admin", role="admin")
    viewer = User(email="viewer@example.com", full_name="Viewer", role="user")
    db.add_all([manager, other, admin, viewer])
    db.flush()

    theater = Theater(manager_id=manager.id, name="Grand Cinema", city="Cairo", address="1 Nile St")
    db.add(theater)
    db.flush()

    hall = Hall(theater_id=theater.id, name="Main Hall", code="A1")
    movie = Movie(imdb_id="tt0133093", title="The Matrix", release_year=1999, runtime_minutes=130)
    untimed = Movie(imdb_id="tt0000001", title="Unknown Runtime")
    db.add_all([hall, movie, untimed])
    db.commit()

    return {
        "manager": manager,
        "other": other,
        "admin": admin,
        "viewer": viewer,
        "theater": theater,
        "hall": hall,
        "movie": movie,
        "untimed": untimed,
    }


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def add_show(db, hall, movie, start, end) -> Show:
    show = Show(hall_id=hall.id, movie_id=movie.id, start_time=start, end_time=end)
    db.add(show)
    db.commit()
    db.refresh(show)
    return show
