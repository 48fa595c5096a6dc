"""FastAPI routes for the categorical lookup lists."""
import logging

from fastapi import APIRouter, Body, HTTPException

from app.errors import InvalidLookupError
from app.models import LookupKey

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/lookups", tags=["lookups"])

# Global DAO reference - set during startup
_lookup_dao = None


def set_lookup_dao(lookup_dao):
    """Set the lookup DAO instance (called during startup)."""
    global _lookup_dao
    _lookup_dao = lookup_dao
    logger.info("[LookupRouter] DAO injected successfully")


def get_lookup_dao():
    if _lookup_dao is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _lookup_dao


def parse_key(key: str) -> LookupKey:
    try:
        return LookupKey(key)
    except ValueError:
        raise InvalidLookupError(f"Unknown lookup: {key}")


@router.get("", summary="All lookup lists")
def all_lookups() -> dict[str, list[str]]:
    dao = get_lookup_dao()
    try:
        return dao.all()
    except Exception as e:
        logger.error(f"[LookupRouter] Error in all_lookups: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/{key}", summary="Add a lookup value")
def add_lookup(key: str, value: str = Body(..., embed=True)) -> list[str]:
    dao = get_lookup_dao()
    try:
        return dao.add(parse_key(key), value)
    except InvalidLookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[LookupRouter] Error in add_lookup: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{key}/{value}", summary="Remove a lookup value")
def remove_lookup(key: str, value: str) -> list[str]:
    dao = get_lookup_dao()
    try:
        return dao.remove(parse_key(key), value)
    except InvalidLookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"[LookupRouter] Error in remove_lookup: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
