from sqlalchemy import Column, String, DateTime, Integer, func
from sqlalchemy.orm import relationship
from showtime.db.session import Base

class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True)
    imdb_id = Column(String(20), unique=True, nullable=True, index=True)
    title = Column(String(100), nullable=False)
    director = Column(String(100), nullable=True)
    release_year = Column(Integer, nullable=True)
    runtime_minutes = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    shows = relationship("Show", back_populates="movie")
