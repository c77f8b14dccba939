"""Reusable type definitions for piper.

Type Aliases:
    UnaryFunction: A callable taking exactly one argument of type ``T`` and
        returning a value of type ``R``.
    Steps: A non-empty tuple of unary functions, validated by Pydantic.

These types are shared by the composition helpers in :mod:`piper.functional`.
"""

from typing import Annotated, Any, Callable, Tuple, TypeVar
import annotated_types as at

__all__ = [
    "UnaryFunction",
    "Steps",
    "T",
    "R",
    "A",
    "B",
    "C",
]

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

# A function that takes one argument
UnaryFunction = Callable[[T], R]

# A tuple of unary functions with at least one element
Steps = Annotated[Tuple[Callable[[Any], Any], ...], at.MinLen(1)]
