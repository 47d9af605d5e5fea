from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from showtime.db.session import Base

class Theater(Base):
    __tablename__ = "theaters"

    id = Column(Integer, primary_key=True)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    city = Column(String(30), nullable=False, index=True)
    address = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)

    # Relationships
    manager = relationship("User")
    halls = relationship("Hall", back_populates="theater", cascade="all, delete-orphan")
