"""
InputGuard: validates the two model names before any collaborator call.
Deterministic; no LLM. Errors are reported per slot, never aggregated.
"""

from __future__ import annotations

from config import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from errors import ValidationError

EMPTY_MESSAGE = "Model name cannot be empty."
TOO_SHORT_MESSAGE = "Model name seems too short. Please enter a valid model."
TOO_LONG_MESSAGE = "Model name seems too long."


def validate_model_name(name: str | None) -> str | None:
    """Return an error message for name, or None when it is acceptable."""
    trimmed = (name or "").strip()
    if not trimmed:
        return EMPTY_MESSAGE
    if len(trimmed) < MIN_NAME_LENGTH:
        return TOO_SHORT_MESSAGE
    if len(trimmed) > MAX_NAME_LENGTH:
        return TOO_LONG_MESSAGE
    return None


class InputGuard:
    """Checks both slots independently."""

    def run(self, name1: str | None, name2: str | None) -> dict[int, str]:
        """Map of slot (1 or 2) -> error message; empty when both pass."""
        errors: dict[int, str] = {}
        for slot, name in ((1, name1), (2, name2)):
            msg = validate_model_name(name)
            if msg:
                errors[slot] = msg
        return errors

    def check(self, name1: str | None, name2: str | None) -> tuple[str, str]:
        """Raise ValidationError on failure, else return the trimmed names."""
        errors = self.run(name1, name2)
        if errors:
            raise ValidationError(errors)
        return (name1 or "").strip(), (name2 or "").strip()
