"""Tools for functional composition."""

from piper.core import Settings, UnaryFunction, UnexpectedValueError, settings
from piper.functional import (
    Pipeline,
    always,
    assert_never,
    identity,
    noop,
    pick,
    picker,
    pipe,
    pipeline,
)
from piper.logger import setup_logger

__all__ = [
    "pipe",
    "Pipeline",
    "pipeline",
    "pick",
    "picker",
    "identity",
    "always",
    "noop",
    "assert_never",
    "UnexpectedValueError",
    "UnaryFunction",
    "Settings",
    "settings",
    "setup_logger",
]
