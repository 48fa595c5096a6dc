"""Handlers package."""
from app.handlers.venue_handler import VenueHandler

__all__ = ["VenueHandler"]
