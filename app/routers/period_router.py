"""FastAPI routes for reporting periods."""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from app.models import PeriodKind, PeriodState
from app.routers.venue_router import get_handler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/periods", tags=["periods"])


@router.get(
    "/default",
    response_model=PeriodState,
    summary="Default period",
    description="Initial period selection (today, Africa/Bamako)",
)
def get_default_period() -> PeriodState:
    handler = get_handler()
    return handler.get_default_period()


@router.get(
    "/{kind}",
    response_model=PeriodState,
    summary="Compute a period",
    description="Start/end dates for today, week (Monday-Sunday), month or an explicit range",
)
def get_period(
    kind: PeriodKind,
    start: Optional[str] = Query(None, description="Range start, passed through as given"),
    end: Optional[str] = Query(None, description="Range end, passed through as given"),
) -> PeriodState:
    try:
        handler = get_handler()
        return handler.get_period(kind, start, end)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[PeriodRouter] Error in get_period: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
