"""Functional primitives for piper.

This package provides the composition helpers themselves: left-to-right
function composition, an immutable composition builder, composable property
access, and a few trivial helpers. Utilities are stateless and
side-effect-free so they can be composed into pipelines freely.
"""

from piper.functional.access import pick, picker
from piper.functional.basics import always, assert_never, identity, noop
from piper.functional.compose import Pipeline, pipe, pipeline

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
]
