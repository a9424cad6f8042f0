"""
Domain exceptions.

The engine degrades gracefully for almost every input problem; these are the
few conditions that are surfaced to the caller.
"""


class AgronomyError(Exception):
    """Base class for agronomic decision engine errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFarmContextError(AgronomyError, ValueError):
    """Raised when a required identifier (crop or farm profile) is absent."""
