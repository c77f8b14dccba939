"""Property access that composes.

:func:`pick` reads one value out of a record, either immediately or as a
curried accessor ready to drop into :func:`piper.functional.compose.pipe`:

    >>> obj = {"foo": {"bar": "baz", "qux": 1}}
    >>> pick("foo", obj)
    {'bar': 'baz', 'qux': 1}
    >>> pipe(pick("foo"), pick("bar"))(obj)
    'baz'

Lookups never fail on an absent key. Mappings answer with ``get``. Other
subscriptable records are subscripted, with ``IndexError``/``KeyError`` read as
"missing". String keys fall back to attribute access when the record cannot be
subscripted with them. Each path gives ``None`` for a missing key.
"""

from collections.abc import Mapping
from typing import Any, Callable, Hashable

__all__ = ["pick", "picker"]

_MISSING = object()


def _lookup(obj: Any, key: Hashable) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    if hasattr(type(obj), "__getitem__"):
        try:
            return obj[key]
        except (IndexError, KeyError):
            return None
        except TypeError:
            # e.g. a namedtuple indexed by field name
            if not isinstance(key, str):
                raise
    elif not isinstance(key, str):
        return obj[key]
    return getattr(obj, key, None)


def picker(key: Hashable) -> Callable[[Any], Any]:
    """Build a one-argument accessor for ``key``.

    Args:
        key: Mapping key, attribute name, or index to read.

    Returns:
        A function taking a record and returning the value at ``key``.
    """

    def _pick(obj: Any) -> Any:
        return _lookup(obj, key)

    _pick.__name__ = _pick.__qualname__ = f"pick({key!r})"
    return _pick


def pick(key: Hashable, obj: Any = _MISSING) -> Any:
    """Return the value at ``key`` in ``obj``, or an accessor awaiting ``obj``.

    Args:
        key: Mapping key, attribute name, or index to read.
        obj: The record. When omitted, the curried accessor is returned.

    Returns:
        The value at ``key`` (``None`` when absent), or ``picker(key)``.
    """
    accessor = picker(key)
    return accessor if obj is _MISSING else accessor(obj)
