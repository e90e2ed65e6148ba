"""Domain exceptions for brews app."""


class BrewLogServiceError(Exception):
    """Base exception for all brew log service errors."""
    pass


class StoreError(BrewLogServiceError):
    """
    Reading from or writing to the brew store failed.

    Network, auth, quota and database errors are not distinguished; the
    original exception is chained as ``__cause__``.
    """
    pass


class InvalidBrewInputError(BrewLogServiceError):
    """One or more submitted measurements is not a finite number."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(
            f"Not a number: {', '.join(self.fields)}"
        )
