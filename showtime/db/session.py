from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from showtime.core.config import settings


def engine_options(url: str) -> dict:
    """Keyword arguments for create_engine, by backend."""
    if url.startswith("sqlite"):
        # The app hands sessions across threadpool workers
        return {"connect_args": {"check_same_thread": False}, "echo": settings.SQL_ECHO}
    # pool_pre_ping drops connections the server closed while idle
    return {"pool_pre_ping": True, "echo": settings.SQL_ECHO}


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
