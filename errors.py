"""
Error taxonomy for a comparison run.
ValidationError never reaches the collaborator; RequestError and ParseError are
shown to the user as a single message and only told apart in logs.
"""

from __future__ import annotations


class ComparisonError(Exception):
    """Base class for everything a comparison run can fail with."""


class ValidationError(ComparisonError):
    """One or both model names failed the input bounds."""

    def __init__(self, field_errors: dict[int, str]) -> None:
        self.field_errors = dict(field_errors)
        detail = "; ".join(f"slot {slot}: {msg}" for slot, msg in sorted(self.field_errors.items()))
        super().__init__(detail or "invalid input")


class RequestError(ComparisonError):
    """The collaborator call failed (network, auth, quota, empty reply)."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class ParseError(ComparisonError):
    """The collaborator replied with something that is not a valid comparison."""

    USER_MESSAGE = (
        "Failed to process the comparison data. The format received from the API "
        "was invalid. Please try again."
    )

    def __init__(self, reason: str, raw: str = "") -> None:
        self.reason = reason
        self.raw = raw
        super().__init__(reason)


def user_message(err: ComparisonError) -> str:
    """Single user-visible message; request and parse failures look alike."""
    if isinstance(err, ParseError):
        return ParseError.USER_MESSAGE
    return str(err) or "An unexpected error occurred."
