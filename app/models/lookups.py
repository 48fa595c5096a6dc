"""Lookup (categorical value list) models."""
from enum import Enum


class LookupKey(str, Enum):
    """Categorical lists used by the venue forms."""
    OPERATORS = "operators"
    SUPPORTS = "supports"
    BET_TYPES = "bet_types"


DEFAULT_LOOKUPS: dict[LookupKey, list[str]] = {
    LookupKey.OPERATORS: ["1xBet", "Bet223", "PremierBet", "MaliBet"],
    LookupKey.SUPPORTS: ["Mobile", "Web", "Salle de jeux"],
    LookupKey.BET_TYPES: ["Simple", "Combiné", "Système"],
}
