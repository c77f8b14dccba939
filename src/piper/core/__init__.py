"""Core types, errors and configuration."""

from piper.core.config import Settings, settings
from piper.core.errors import UnexpectedValueError
from piper.core.types import UnaryFunction

__all__ = [
    "Settings",
    "settings",
    "UnexpectedValueError",
    "UnaryFunction",
]
