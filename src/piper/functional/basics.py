"""Single-expression helpers that show up around composed functions."""

from typing import Any, Callable, NoReturn, Optional

from piper.core.errors import UnexpectedValueError
from piper.core.types import A
from piper.logger.logger import logger

__all__ = ["identity", "always", "noop", "assert_never"]


def noop(*args: Any, **kwargs: Any) -> None:
    """Do nothing."""


def identity(a: A) -> A:
    """Return the argument unchanged."""
    return a


def always(a: A) -> Callable[[Optional[Any]], A]:
    """Return a function that ignores its argument and returns ``a``.

    >>> always(1)()
    1
    >>> always(1)("ignored")
    1
    """

    def _always(_: Optional[Any] = None) -> A:
        return a

    return _always


def assert_never(value: NoReturn) -> NoReturn:
    """Mark a branch that exhaustive type narrowing has proven unreachable.

    Static checkers reject any call whose argument has not been narrowed to
    ``NoReturn``. Reaching it at runtime means the narrowing was wrong.

    Example:
        >>> def describe(shape: Circle | Square) -> str:
        ...     if isinstance(shape, Circle):
        ...         return "circle"
        ...     if isinstance(shape, Square):
        ...         return "square"
        ...     assert_never(shape)

    Raises:
        UnexpectedValueError: Always, carrying ``value``.
    """
    logger.error(f"Unexpected value reached assert_never: {value!r}")
    raise UnexpectedValueError(value)
