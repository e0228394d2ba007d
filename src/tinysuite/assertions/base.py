"""Base error type for the assertion system."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """Raised by an assertion whose condition does not hold.

    Attributes:
        message: Human-readable description of the failed check. Either the
            assertion's default wording or the caller's custom message.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
