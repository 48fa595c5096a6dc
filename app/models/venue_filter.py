"""Venue listing filter models."""
from typing import Optional

from pydantic import BaseModel, field_validator


class VenueFilters(BaseModel):
    """Optional constraints applied to the venue collection.

    Every field is independent; an absent field means no constraint on that
    dimension. Empty strings are treated as absent.
    """
    quartier: Optional[str] = None  # trimmed, case-insensitive equality
    operator: Optional[str] = None  # exact equality
    bet_type: Optional[str] = None  # exact equality
    q: Optional[str] = None  # free text over quartier, address, notes, phone

    @field_validator("quartier", "operator", "bet_type", "q", mode="before")
    @classmethod
    def empty_as_absent(cls, v):
        if isinstance(v, str) and v == "":
            return None
        return v

    def is_empty(self) -> bool:
        """True when no constraint is set."""
        return not any((self.quartier, self.operator, self.bet_type, self.q))
