from fastapi import APIRouter

# Public — show search and lookup, theater browsing
from showtime.api.v1.public.shows import router as public_shows_router
from showtime.api.v1.public.theaters import router as public_theaters_router

# Admin — theater and hall management, show scheduling and hall schedules
from showtime.api.v1.admin.shows import router as admin_shows_router
from showtime.api.v1.admin.theaters import (
    router as admin_theaters_router,
    hall_router as admin_halls_router,
)

api_router = APIRouter()

# --- Public ---
api_router.include_router(public_shows_router)
api_router.include_router(public_theaters_router)

# --- Admin ---
api_router.include_router(admin_theaters_router)
api_router.include_router(admin_halls_router)
api_router.include_router(admin_shows_router)
