"""Constructors bridging optional values and raising code into Result.

`from_throwing` is the single boundary where exception-style failures become
values. Code past that boundary composes with the Result combinators.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, ParamSpec, TypeVar, overload

from fallible.observability import should_log_captured

from .result import Err, Ok, Result

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger("fallible.interop")

CatchSpec = type[BaseException] | tuple[type[BaseException], ...]


def from_optional(value: T | None, or_fail: Callable[[], E]) -> Result[T, E]:
    """Ok(value) unless value is None, else Err(or_fail()).

    `or_fail` is called only for None.

    Example:
        >>> from_optional({"a": 1}.get("a"), lambda: "missing")
        Ok(1)
        >>> from_optional({"a": 1}.get("b"), lambda: "missing")
        Err('missing')
    """
    return Err(or_fail()) if value is None else Ok(value)


def from_throwing(f: Callable[[], T], *, catch: CatchSpec = Exception) -> Result[T, BaseException]:
    """Run `f`, capturing its return as Ok and a raised `catch` instance as Err.

    Exceptions outside `catch` propagate. The default leaves
    KeyboardInterrupt and SystemExit alone.

    Example:
        >>> from_throwing(lambda: int("42"))
        Ok(42)
        >>> from_throwing(lambda: int("x"), catch=ValueError).is_err()
        True
    """
    return _capture(f, catch, _describe(f))


@overload
def materialize(func: Callable[P, T], /) -> Callable[P, Result[T, BaseException]]: ...

@overload
def materialize(*, catch: CatchSpec = ...) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]: ...


def materialize(
    func: Callable[P, T] | None = None,
    /,
    *,
    catch: CatchSpec = Exception,
) -> Callable[P, Result[T, BaseException]] | Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]:
    """Decorator turning a raising function into one returning Result.

    Usable bare or with arguments:

        >>> @materialize
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Ok(7)

        >>> @materialize(catch=KeyError)
        ... def lookup(key: str) -> int:
        ...     return {"a": 1}[key]
        >>> lookup("b").is_err()
        True
    """

    def decorator(fn: Callable[P, T]) -> Callable[P, Result[T, BaseException]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, BaseException]:
            return _capture(lambda: fn(*args, **kwargs), catch, fn.__qualname__)
        return wrapper

    return decorator(func) if func is not None else decorator


def _capture(f: Callable[[], T], catch: CatchSpec, source: str) -> Result[T, BaseException]:
    try:
        value = f()
    except catch as exc:
        captured = exc
    else:
        return Ok(value)
    if should_log_captured(logger):
        logger.debug("captured %s from %s: %s", type(captured).__name__, source, captured)
    return Err(captured)


def _describe(f: Callable[..., object]) -> str:
    return getattr(f, "__qualname__", None) or repr(f)
