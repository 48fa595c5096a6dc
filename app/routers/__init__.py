"""Routers package."""
from app.routers.venue_router import router as venue_router, set_venue_handler
from app.routers.period_router import router as period_router
from app.routers.lookup_router import router as lookup_router, set_lookup_dao

__all__ = [
    "venue_router",
    "set_venue_handler",
    "period_router",
    "lookup_router",
    "set_lookup_dao",
]
