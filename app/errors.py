"""Domain errors raised by the data access and service layers."""


class VenueNotFoundError(KeyError):
    """Raised when a venue id does not exist in storage."""

    def __init__(self, venue_id: str):
        super().__init__(venue_id)
        self.venue_id = venue_id

    def __str__(self) -> str:
        return f"Venue not found: {self.venue_id}"


class ExportValidationError(ValueError):
    """Raised when export parameters are incomplete or inconsistent."""


class InvalidLookupError(ValueError):
    """Raised for an unknown lookup list name."""
