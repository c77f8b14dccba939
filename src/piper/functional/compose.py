"""Left-to-right composition of unary functions.

Two entry points build the same thing:

    - :func:`pipe` takes every step at once and returns the composed function.
    - :func:`pipeline` starts an immutable :class:`Pipeline` that grows one
      step per :meth:`Pipeline.map` call, which reads well when the steps are
      chosen in a loop or spread over several statements.

Example:
    Reverse and upper-case a word both ways::

        upper = str.upper
        split = list
        reverse = lambda chars: chars[::-1]
        join = "".join

        pipe(upper, split, reverse, join)("food")  # 'DOOF'
        pipeline(upper).map(split).map(reverse).map(join).fn("food")  # 'DOOF'

Composition never catches anything: if a step raises, the exception reaches
the caller untouched and the remaining steps are skipped.
"""

from functools import reduce
from typing import Any, Callable, Generic

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from piper.core.types import A, B, C, Steps, UnaryFunction
from piper.functional.basics import identity
from piper.logger.logger import logger

__all__ = ["pipe", "Pipeline", "pipeline"]


def _apply(value: Any, fn: Callable[[Any], Any]) -> Any:
    return fn(value)


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", None) or repr(fn)


def pipe(*fns: UnaryFunction[Any, Any]) -> UnaryFunction[Any, Any]:
    """Compose unary functions from first to last.

    ``pipe(f, g, h)(x)`` is ``h(g(f(x)))``. With no functions the result is
    :func:`identity`; with one it is that function itself.

    Args:
        *fns: Unary functions, each accepting the previous one's result.

    Returns:
        The composed unary function.

    Raises:
        TypeError: If any argument is not callable.
    """
    for position, fn in enumerate(fns):
        if not callable(fn):
            raise TypeError(f"pipe() argument {position} is not callable: {fn!r}")

    if not fns:
        return identity

    if len(fns) == 1:
        return fns[0]

    def piped(value: Any) -> Any:
        return reduce(_apply, fns, value)

    piped.__name__ = piped.__qualname__ = (
        f"pipe({', '.join(_describe(fn) for fn in fns)})"
    )
    logger.debug(f"Composed {len(fns)} functions into {piped.__name__}")
    return piped


class Pipeline(BaseModel, Generic[A, B]):
    """Immutable builder for a left-to-right composition.

    A pipeline wraps the steps it was built from and exposes their
    composition as :attr:`fn`. :meth:`map` never touches the receiver; it
    returns a new pipeline with one more step, so a partially built pipeline
    can be shared and extended in different directions.

    Steps are kept in a flat tuple rather than nested closures, so chains of
    any length evaluate without deepening the call stack.

    Attributes:
        steps: The unary functions, in application order.
    """

    steps: Steps = Field(
        ..., description="Unary functions applied from first to last."
    )

    model_config = ConfigDict(frozen=True)

    _fn: Callable[[Any], Any] = PrivateAttr()

    def __init__(self, fn: UnaryFunction[A, B] | None = None, /, **data: Any):
        if fn is not None:
            data["steps"] = (fn,)
        super().__init__(**data)

    def model_post_init(self, __context: Any) -> None:
        self._fn = pipe(*self.steps)

    @property
    def fn(self) -> UnaryFunction[A, B]:
        """The composed function, built once per pipeline."""
        return self._fn

    def map(self, callback: UnaryFunction[B, C]) -> "Pipeline[A, C]":
        """Return a new pipeline that feeds this one's result to ``callback``."""
        return Pipeline(steps=self.steps + (callback,))

    def __call__(self, value: A) -> B:
        return self._fn(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        return self.steps == other.steps

    def __hash__(self) -> int:
        return hash(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


def pipeline(fn: UnaryFunction[A, B]) -> Pipeline[A, B]:
    """Start a :class:`Pipeline` from any unary function."""
    return Pipeline(fn)
