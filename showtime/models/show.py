from sqlalchemy import Column, DateTime, Integer, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from showtime.db.session import Base

class Show(Base):
    __tablename__ = "shows"
    __table_args__ = (
        CheckConstraint("start_time < end_time", name="shows_time_range_check"),
    )

    id = Column(Integer, primary_key=True)
    hall_id = Column(Integer, ForeignKey("halls.id"), nullable=False, index=True)
    movie_id = Column(Integer, ForeignKey("movies.id"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    hall = relationship("Hall", back_populates="shows")
    movie = relationship("Movie", back_populates="shows")
