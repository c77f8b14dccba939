"""Exceptions raised by piper."""

from typing import Any

__all__ = ["UnexpectedValueError"]


class UnexpectedValueError(AssertionError):
    """Raised when a value reaches a branch that should be unreachable.

    Attributes:
        value: The offending value.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unexpected value: {value}")
