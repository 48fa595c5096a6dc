"""Services package."""
from app.services.venue_service import VenueService
from app.services.export_service import ExportService, VENUE_EXPORT_COLUMNS
from app.services.venue_filter import filter_venues
from app.services.period import compute_period, compute_default_period
from app.services.csv_export import build_csv, download_csv

__all__ = [
    "VenueService",
    "ExportService",
    "VENUE_EXPORT_COLUMNS",
    "filter_venues",
    "compute_period",
    "compute_default_period",
    "build_csv",
    "download_csv",
]
