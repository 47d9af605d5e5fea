from typing import Optional, List
from pydantic import BaseModel, Field
from datetime import datetime


# Hall Schemas
class HallBase(BaseModel):
    name: str = Field(min_length=1, max_length=30)


class HallCreate(HallBase):
    code: str = Field(min_length=1, max_length=10, pattern=r"^[A-Za-z0-9]+$")


# The code addresses the hall's shows, so only the name can change
class HallUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=30)


class Hall(HallBase):
    id: int
    theater_id: int
    code: str
    is_active: bool

    class Config:
        from_attributes = True


# Theater Schemas
class TheaterBase(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    city: str = Field(min_length=1, max_length=30)
    address: str = Field(min_length=1, max_length=100)


class TheaterCreate(TheaterBase):
    pass


class TheaterUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    city: Optional[str] = Field(None, min_length=1, max_length=30)
    address: Optional[str] = Field(None, min_length=1, max_length=100)


class Theater(TheaterBase):
    id: int
    manager_id: int
    is_active: bool
    created_at: Optional[datetime] = None
    halls: List[Hall] = []

    @classmethod
    def from_model(cls, theater) -> "Theater":
        item = cls.model_validate(theater)
        item.halls = [h for h in item.halls if h.is_active]
        return item

    class Config:
        from_attributes = True


# Compact theater for search listings
class TheaterListItem(TheaterBase):
    id: int
    manager_id: int

    class Config:
        from_attributes = True


class DeleteResponse(BaseModel):
    id: int
    is_active: bool
