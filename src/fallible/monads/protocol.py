"""Abstract result capability with every operation derived from case analysis.

A conforming type supplies exactly three things:
- `success` / `failure` classmethod constructors
- `analysis`, the case-analysis primitive

Everything else (value access, Functor/Monad operations, recovery,
conjunction, equality) has a default body written only in terms of those
three. Implementations may specialize a default but must keep its semantics.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
R = TypeVar("R")  # Case-analysis result


class ResultProtocol(ABC, Generic[T, E]):
    """Either a success holding a value or a failure holding an error.

    Subclasses implement `success`, `failure` and `analysis`. The derived
    combinators never inspect the variant any other way, so verifying those
    three is enough to trust the whole algebra.
    """

    __slots__ = ()

    # ─── Core ────────────────────────────────────────────────────────

    @classmethod
    @abstractmethod
    def success(cls, value: T) -> ResultProtocol[T, E]:
        """Construct a success wrapping `value`."""

    @classmethod
    @abstractmethod
    def failure(cls, error: E) -> ResultProtocol[T, E]:
        """Construct a failure wrapping `error`."""

    @abstractmethod
    def analysis(self, if_success: Callable[[T], R], if_failure: Callable[[E], R]) -> R:
        """Case analysis: apply `if_success` to the value or `if_failure` to the error.

        Exactly one callback runs. Its return value is returned unchanged.
        """

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Keyword spelling of `analysis`.

        Example:
            >>> Ok(42).match(ok=lambda x: f"got {x}", err=lambda e: f"failed: {e}")
            'got 42'
        """
        return self.analysis(ok, err)

    # ─── Inspection ──────────────────────────────────────────────────

    @property
    def value(self) -> T | None:
        """The value if this is a success, else None."""
        return self.analysis(lambda v: v, lambda _: None)

    @property
    def error(self) -> E | None:
        """The error if this is a failure, else None."""
        return self.analysis(lambda _: None, lambda e: e)

    def is_ok(self) -> bool:
        """True for a success. Unambiguous even when the value is None."""
        return self.analysis(lambda _: True, lambda _: False)

    def is_err(self) -> bool:
        """True for a failure."""
        return self.analysis(lambda _: False, lambda _: True)

    # ─── Monad Operations ────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], ResultProtocol[U, E]]) -> ResultProtocol[U, E]:
        """Monadic bind: apply `f` to the value, or re-wrap the error.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]
        """
        return self.analysis(f, self.failure)

    def and_then(self, f: Callable[[T], ResultProtocol[U, E]]) -> ResultProtocol[U, E]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def flat_map_err(self, f: Callable[[E], ResultProtocol[T, F]]) -> ResultProtocol[T, F]:
        """Apply `f` to the error, or re-wrap the value.

        Type signature: Result[T, E] -> (E -> Result[T, F]) -> Result[T, F]
        """
        return self.analysis(self.success, f)

    def or_else(self, f: Callable[[E], ResultProtocol[T, F]]) -> ResultProtocol[T, F]:
        """Alias for flat_map_err."""
        return self.flat_map_err(f)

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> ResultProtocol[U, E]:
        """Apply `f` to the value, or re-wrap the error."""
        return self.flat_map(lambda v: self.success(f(v)))

    def map_err(self, f: Callable[[E], F]) -> ResultProtocol[T, F]:
        """Apply `f` to the error, or re-wrap the value."""
        return self.flat_map_err(lambda e: self.failure(f(e)))

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> ResultProtocol[U, F]:
        """Apply `ok_fn` to the value or `err_fn` to the error."""
        return self.analysis(lambda v: self.success(ok_fn(v)), lambda e: self.failure(err_fn(e)))

    # ─── Recovery ────────────────────────────────────────────────────

    def recover(self, fallback: Callable[[], T]) -> T:
        """The value, or `fallback()` for a failure. `fallback` runs only on failure."""
        return self.analysis(lambda v: v, lambda _: fallback())

    def or_value(self, fallback: Callable[[], T]) -> T:
        """Alias for recover."""
        return self.recover(fallback)

    def recover_with(self, fallback: Callable[[], ResultProtocol[T, E]]) -> ResultProtocol[T, E]:
        """Self for a success, else `fallback()`. `fallback` runs only on failure."""
        return self.analysis(lambda _: self, lambda _: fallback())

    def unwrap_or(self, default: T) -> T:
        """The value, or an already-computed `default`."""
        return self.analysis(lambda v: v, lambda _: default)

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """The value, or `f(error)`."""
        return self.analysis(lambda v: v, f)

    # ─── Conjunction ─────────────────────────────────────────────────

    def both(self, other: Callable[[], ResultProtocol[U, E]]) -> ResultProtocol[tuple[T, U], E]:
        """Pair two successes, keeping the earlier failure.

        `other` is only called when self is a success, so a failing left
        side short-circuits. When both fail, the left error wins.

        Example:
            >>> Ok(3).both(lambda: Ok(4))
            Ok((3, 4))
        """
        return self.flat_map(lambda left: other().map(lambda right: (left, right)))

    # ─── Side Effects ────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> ResultProtocol[T, E]:
        """Call `f` with the value for its side effect; return self."""
        self.analysis(f, lambda _: None)
        return self

    def inspect_err(self, f: Callable[[E], object]) -> ResultProtocol[T, E]:
        """Call `f` with the error for its side effect; return self."""
        self.analysis(lambda _: None, f)
        return self

    # ─── Conversion ──────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to an (ok_value, err_value) pair."""
        return self.analysis(lambda v: (v, None), lambda e: (None, e))

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        """Both successes with equal values, or both failures with equal errors."""
        if not isinstance(other, ResultProtocol):
            return NotImplemented
        return self.analysis(
            lambda v: other.analysis(lambda w: bool(v == w), lambda _: False),
            lambda e: other.analysis(lambda _: False, lambda f: bool(e == f)),
        )

    def __hash__(self) -> int:
        return self.analysis(lambda v: hash((True, v)), lambda e: hash((False, e)))

    def __bool__(self) -> bool:
        """Truthy for a success."""
        return self.is_ok()

    def __iter__(self) -> Iterator[T]:
        """Yield the value once for a success, nothing for a failure."""
        yield from self.analysis(lambda v: (v,), lambda _: ())

    def __repr__(self) -> str:
        return self.analysis(lambda v: f"Ok({v!r})", lambda e: f"Err({e!r})")

    def __str__(self) -> str:
        return repr(self)
