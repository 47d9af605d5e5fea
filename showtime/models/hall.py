from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from showtime.db.session import Base

class Hall(Base):
    __tablename__ = "halls"
    __table_args__ = (
        # A hall code only identifies a hall within its theater
        UniqueConstraint("theater_id", "code", name="halls_theater_id_code_key"),
    )

    id = Column(Integer, primary_key=True)
    theater_id = Column(Integer, ForeignKey("theaters.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    code = Column(String(10), nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    theater = relationship("Theater", back_populates="halls")
    shows = relationship("Show", back_populates="hall", cascade="all, delete-orphan")
