"""Error taxonomy shared by the API, the feed and the dashboard."""


class RatesError(Exception):
    """Base class for request-level failures surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailable(RatesError):
    """The rates fetch failed in transport or returned ``ok: false``.

    ``rejected`` is set when the API answered 2xx with ``ok: false``; the
    dashboard keeps its snapshot then and clears it otherwise.
    """

    def __init__(self, message: str, rejected: bool = False):
        super().__init__(message)
        self.rejected = rejected


class InvalidInput(RatesError):
    """A calculation request carried a non-finite or out-of-range field."""


class CalculationFailed(RatesError):
    """The calculate endpoint failed in transport or returned ``ok: false``."""
