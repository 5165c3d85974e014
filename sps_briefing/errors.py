"""
Error taxonomy for the briefing engine.

Only LocationNotFound escapes a briefing request. The other errors are
raised inside the engine and recovered at the component that owns them.
"""


class BriefingError(Exception):
    """Base class for all briefing engine errors."""


class LocationNotFound(BriefingError):
    """No geocoding source returned a usable coordinate for the query."""

    def __init__(self, query: str, message: str = None):
        self.query = query
        super().__init__(message or f"Location not found: {query!r}")


class RouteUnavailable(BriefingError):
    """The directions provider could not produce a route."""


class ProviderUnavailable(BriefingError):
    """A single data provider failed, timed out or returned garbage."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider}: {reason}")
