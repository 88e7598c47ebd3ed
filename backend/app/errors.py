"""Service-level exceptions raised by the recommendation pipeline."""


class WanderlistError(Exception):
    """Base exception carrying diagnostic details (counts and flags only)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ScoringError(WanderlistError):
    """Unexpected failure while generating recommendations."""


class IntegrationError(WanderlistError):
    """A follow-up answer could not be applied to the travel input."""
