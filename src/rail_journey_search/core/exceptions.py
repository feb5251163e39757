"""Custom exceptions for railway journey search."""


class JourneySearchError(Exception):
    """Base exception for journey search errors."""

    pass


class StationNotFoundError(JourneySearchError):
    """Raised when a station name cannot be found on the network."""

    def __init__(self, station_names: list[str]):
        self.station_names = station_names
        names = ", ".join(station_names)
        super().__init__(
            f"One or more station cannot be found on this network: {names}"
        )


class DataFormatError(JourneySearchError):
    """Raised when a network description is malformed."""

    pass


class NetworkFileError(JourneySearchError):
    """Raised when a network file cannot be read."""

    pass


class ValidationError(JourneySearchError):
    """Raised when input validation fails."""

    pass
