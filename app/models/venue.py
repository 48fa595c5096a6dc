"""Venue data models using Pydantic."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

VENUE_SUPPORT = "Salle de jeux"

# Form messages shown to operators (French UI)
REQUIRED_MESSAGES = {
    "quartier": "Le champ Quartier est requis.",
    "operator": "Veuillez sélectionner un opérateur.",
    "bet_type": "Veuillez sélectionner un type de pari.",
    "address": "L’adresse est requise.",
    "created_by": "L'auteur de la création est requis.",
}
SUPPORT_MESSAGE = f'Support doit être "{VENUE_SUPPORT}".'


def _blank_to_none(v: Any) -> Any:
    """Treat empty form inputs as absent values."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


class Venue(BaseModel):
    """Gaming hall as stored by the data access layer.

    `id`, `created_at` and `created_by` are provenance fields assigned on
    creation and never changed afterwards.
    """

    id: str
    quartier_no: Optional[str] = None
    quartier: str = ""
    operator: str = ""
    support: str = VENUE_SUPPORT
    bet_type: str = ""
    address: str = ""
    contact_phone: Optional[str] = None
    gps_lat: Optional[float] = None
    gps_lng: Optional[float] = None
    notes: Optional[str] = None
    created_at: str = ""
    created_by: str = ""

    def __str__(self) -> str:
        return (
            f"Venue(id={self.id}, quartier={self.quartier}, "
            f"operator={self.operator}, address={self.address})"
        )


class VenueFields(BaseModel):
    """Editable venue fields shared by the create and update forms."""

    quartier_no: Optional[str] = None
    contact_phone: Optional[str] = None
    gps_lat: Optional[float] = None
    gps_lng: Optional[float] = None
    notes: Optional[str] = None

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    @field_validator("quartier_no", mode="before")
    @classmethod
    def coerce_quartier_no(cls, v: Any) -> Optional[str]:
        """Accept the quartier number as text or number; "" means absent."""
        v = _blank_to_none(v)
        if v is None:
            return None
        if isinstance(v, bool):
            raise ValueError("Le numéro de quartier doit être un texte ou un nombre.")
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)

    @field_validator("gps_lat", "gps_lng", mode="before")
    @classmethod
    def coerce_coordinate(cls, v: Any) -> Optional[float]:
        v = _blank_to_none(v)
        if v is None:
            return None
        try:
            return float(v)
        except (TypeError, ValueError):
            raise ValueError("La coordonnée GPS doit être un nombre.")

    @field_validator("contact_phone", "notes", mode="before")
    @classmethod
    def blank_optional_text(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("support", mode="after", check_fields=False)
    @classmethod
    def check_support(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v != VENUE_SUPPORT:
            raise ValueError(SUPPORT_MESSAGE)
        return v


class VenueCreate(VenueFields):
    """Payload for creating a venue (id/created_at are assigned by storage)."""

    quartier: str
    operator: str
    support: str = VENUE_SUPPORT
    bet_type: str
    address: str
    created_by: str

    @field_validator("quartier", "operator", "bet_type", "address", "created_by")
    @classmethod
    def require_text(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return v


class VenueUpdate(VenueFields):
    """Partial venue update. Only fields explicitly sent are applied."""

    quartier: Optional[str] = None
    operator: Optional[str] = None
    support: Optional[str] = None
    bet_type: Optional[str] = None
    address: Optional[str] = None

    @field_validator("quartier", "operator", "bet_type", "address")
    @classmethod
    def reject_blank(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is not None and not v:
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return v

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set by the caller.

        An explicit null clears optional fields but is ignored for the
        required ones.
        """
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_MESSAGES
        }


class VenuePage(BaseModel):
    """One page of the filtered and sorted venue listing."""

    items: list[Venue] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10
    total_pages: int = 1
