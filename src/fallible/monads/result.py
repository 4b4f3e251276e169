"""Result/Either monad for type-safe error handling.

Implements a discriminated union for success/failure. `Result.analysis` is the
only place the variant is inspected; every combinator is inherited from
`ResultProtocol` and derived from it:
- Functor: map, map_err
- Monad: flat_map (bind), flat_map_err
- Bifunctor: bimap
- Recovery: recover, recover_with, or_value
- Conjunction: both
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, NoReturn, TypeVar, cast

from fallible.errors import ResultException, UnwrapError

from .protocol import ResultProtocol

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")

_OK = True
_ERR = False


class Result(ResultProtocol[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).error
        'fail'
        >>> Ok(5).flat_map(lambda x: Ok(x * 2) if x > 0 else Err("neg"))
        Ok(10)

    Notes:
        - Uses __slots__; instances reject attribute assignment
        - All operations return a new Result
        - `case Result(payload)` binds the payload of either variant; guard
          on `is_ok()` / `is_err()` to tell them apart
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Result[T, E]], tuple[T | E, bool]]:
        return (type(self), (self._value, self._is_ok))

    # ─── Core ────────────────────────────────────────────────────────

    @classmethod
    def success(cls, value: T) -> Result[T, E]:
        return cls(value, _OK)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        return cls(error, _ERR)

    def analysis(self, if_success: Callable[[T], R], if_failure: Callable[[E], R]) -> R:
        """Case analysis. The sole branch on the variant in this package."""
        if self._is_ok:
            return if_success(cast(T, self._value))
        return if_failure(cast(E, self._value))

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        return self.expect("unwrap() on Err")

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        return self.expect_err("unwrap_err() on Ok")

    def expect(self, msg: str) -> T:
        """Extract Ok value, raising UnwrapError with `msg` on Err."""
        return self.analysis(lambda v: v, lambda e: _raise(UnwrapError(f"{msg}: {e!r}", e)))

    def expect_err(self, msg: str) -> E:
        """Extract Err value, raising UnwrapError with `msg` on Ok."""
        return self.analysis(lambda v: _raise(UnwrapError(f"{msg}: {v!r}", v)), lambda e: e)

    def dematerialize(self) -> T:
        """Return the value, or raise the error.

        Exception errors are raised as-is (chained traceback preserved).
        Anything else is wrapped in ResultException.
        """
        return self.analysis(
            lambda v: v,
            lambda e: _raise(e if isinstance(e, BaseException) else ResultException(e)),
        )

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Join a nested Result: Result[Result[T, E], E] -> Result[T, E]

        The Ok payload must itself be a Result; it is returned as-is.
        """
        return self.flat_map(lambda inner: inner)


def _raise(exc: BaseException) -> NoReturn:
    raise exc


class NoError(Exception):
    """An error type that cannot be constructed.

    `Result[int, NoError]` documents a result that can never be a failure.
    """

    def __new__(cls, *args: object, **kwargs: object) -> NoReturn:
        raise TypeError("NoError cannot be instantiated")


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result.success(value)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result.failure(error)


def both(left: ResultProtocol[T, E], right: Callable[[], ResultProtocol[U, E]]) -> ResultProtocol[tuple[T, U], E]:
    """Function form of `left.both(right)`; `right` runs only if `left` is Ok.

    Example:
        >>> both(Ok(3), lambda: Ok(4)).map(lambda p: p[0] + p[1])
        Ok(7)
    """
    return left.both(right)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[ResultProtocol[T, E]]) -> Result[list[T], E]:
    """Convert Results to a Result of list. Fails fast on the first Err.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> sequence([Ok(1), Err("fail"), Err("later")])
        Err('fail')
    """
    values: list[T] = []
    for result in results:
        failed = result.analysis(lambda v: values.append(v), lambda e: Err(e))
        if failed is not None:
            return failed
    return Ok(values)


def traverse(items: Iterable[T], f: Callable[[T], ResultProtocol[U, E]]) -> Result[list[U], E]:
    """Map `f` over items and sequence the results. Stops calling `f` after the first Err."""
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[ResultProtocol[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error instead of failing fast.

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        result.analysis(values.append, errors.append)
    return Ok(values) if not errors else Err(errors)
