"""Custom exception hierarchy for recyclefinder."""


class RecycleFinderError(Exception):
    """Base exception for all recyclefinder errors."""


class GeocodingFailure(RecycleFinderError):
    """The geocoding service could not be reached or returned garbage."""

    def __init__(self, place_name: str, detail: str):
        self.place_name = place_name
        self.detail = detail
        super().__init__(f"Failed to geocode '{place_name}': {detail}")


class CenterLookupFailure(RecycleFinderError):
    """The spatial query service could not be reached or returned garbage."""

    def __init__(self, latitude: float, longitude: float, detail: str):
        self.latitude = latitude
        self.longitude = longitude
        self.detail = detail
        super().__init__(
            f"Failed to find recycling centers near "
            f"({latitude}, {longitude}): {detail}"
        )
