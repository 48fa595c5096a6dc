"""FastAPI routes for venue endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.errors import ExportValidationError, VenueNotFoundError
from app.models import Venue, VenueCreate, VenueFilters, VenuePage, VenueUpdate
from app.handlers.venue_handler import SORT_KEYS

logger = logging.getLogger(__name__)

# Create router at module level
router = APIRouter()

# Global handler reference - set during startup
_venue_handler = None

SORT_KEY_PATTERN = "^(" + "|".join(SORT_KEYS) + ")$"


def set_venue_handler(handler):
    """Set the venue handler instance (called during startup)."""
    global _venue_handler
    _venue_handler = handler
    logger.info("[VenueRouter] Handler injected successfully")


def get_handler():
    """Get the venue handler, raising error if not initialized."""
    if _venue_handler is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _venue_handler


def venue_filters(
    quartier: Optional[str] = Query(None, description="Neighborhood (trimmed, case-insensitive)"),
    operator: Optional[str] = Query(None, description="Operator (exact match)"),
    bet_type: Optional[str] = Query(None, description="Bet type (exact match)"),
    q: Optional[str] = Query(None, description="Free text over quartier, address, notes, phone"),
) -> VenueFilters:
    return VenueFilters(quartier=quartier, operator=operator, bet_type=bet_type, q=q)


@router.get(
    "/v1/venues",
    response_model=VenuePage,
    summary="List venues",
    description="Filtered, sorted and paginated venue listing",
)
def list_venues(
    filters: VenueFilters = Depends(venue_filters),
    sort: str = Query("quartier", pattern=SORT_KEY_PATTERN, description="Sort column"),
    order: str = Query("asc", pattern="^(asc|desc)$", description="Sort direction"),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: Optional[int] = Query(None, ge=1, le=500, description="Items per page"),
) -> VenuePage:
    try:
        handler = get_handler()
        return handler.list_venues(filters, sort, order, page, page_size)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[VenueRouter] Error in list_venues: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/v1/venues/export.csv",
    response_class=Response,
    summary="Export venue listing",
    description="CSV download of the filtered venue listing",
)
def export_venues(
    filters: VenueFilters = Depends(venue_filters),
    sort: str = Query("quartier", pattern=SORT_KEY_PATTERN),
    order: str = Query("asc", pattern="^(asc|desc)$"),
) -> Response:
    try:
        handler = get_handler()
        return handler.export_listing_csv(filters, sort, order)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[VenueRouter] Error in export_venues: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/v1/exports/venues.csv",
    response_class=Response,
    summary="Export an operator's venues",
)
def export_operator_venues(
    operator: str = Query("", description="Operator (required)"),
    start: Optional[str] = Query(None, description="Period start (YYYY-MM-DD)"),
    end: Optional[str] = Query(None, description="Period end (YYYY-MM-DD)"),
) -> Response:
    try:
        handler = get_handler()
        return handler.export_operator_csv(operator, start, end)
    except HTTPException:
        raise
    except ExportValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"[VenueRouter] Error in export_operator_venues: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/v1/venues/{venue_id}", response_model=Venue, summary="Get a venue")
def get_venue(venue_id: str) -> Venue:
    try:
        handler = get_handler()
        venue = handler.get_venue(venue_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[VenueRouter] Error in get_venue: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if venue is None:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


@router.post(
    "/v1/venues",
    response_model=Venue,
    status_code=status.HTTP_201_CREATED,
    summary="Create a venue",
)
def create_venue(data: VenueCreate) -> Venue:
    try:
        handler = get_handler()
        return handler.create_venue(data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[VenueRouter] Error in create_venue: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.patch("/v1/venues/{venue_id}", response_model=Venue, summary="Update a venue")
def update_venue(venue_id: str, changes: VenueUpdate) -> Venue:
    try:
        handler = get_handler()
        return handler.update_venue(venue_id, changes)
    except HTTPException:
        raise
    except VenueNotFoundError:
        raise HTTPException(status_code=404, detail="Venue not found")
    except Exception as e:
        logger.error(f"[VenueRouter] Error in update_venue: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete(
    "/v1/venues/{venue_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a venue",
)
def delete_venue(venue_id: str) -> Response:
    try:
        handler = get_handler()
        handler.delete_venue(venue_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[VenueRouter] Error in delete_venue: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/ping",
    summary="Health check",
    description="Health check endpoint",
)
def ping() -> dict[str, str]:
    """Health check endpoint."""
    handler = get_handler()
    return handler.ping()
