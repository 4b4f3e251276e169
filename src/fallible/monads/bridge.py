"""Adapters for APIs that report failure through an output error slot.

Some callables follow the convention "return the value (or None / False on
failure) and write the error into a caller-supplied slot". These helpers
hand such a callable a fresh `ErrorSlot` and turn its outcome into a Result.

Example:
    >>> def read_port(text: str, slot: ErrorSlot) -> int | None:
    ...     if not text.isdigit():
    ...         slot.error = ValueError(f"bad port: {text}")
    ...         return None
    ...     return int(text)
    >>> try_call(lambda slot: read_port("8080", slot))
    Ok(8080)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TypeVar

from fallible.errors import ResultError, error
from fallible.observability import should_log_captured

from .interop import from_optional
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from types import FrameType

T = TypeVar("T")

logger = logging.getLogger("fallible.bridge")


@dataclass(slots=True)
class ErrorSlot:
    """Output slot a legacy-style callee writes its error into."""

    error: object | None = None


def try_call(
    fn: Callable[[ErrorSlot], T | None],
    *,
    function: str | None = None,
    file: str | None = None,
    line: int | None = None,
) -> Result[T, object]:
    """Call `fn(slot)`. A non-None return is Ok; None is Err.

    The Err holds whatever `fn` wrote into the slot. A callee that fails
    without filling the slot gets a ResultError tagged with the location of
    the `try_call` caller (or the explicit `function`/`file`/`line`).
    """
    slot = ErrorSlot()
    caller = sys._getframe(1)
    return from_optional(fn(slot), lambda: _slot_error(slot, caller, function, file, line))


def try_check(
    fn: Callable[[ErrorSlot], bool],
    *,
    function: str | None = None,
    file: str | None = None,
    line: int | None = None,
) -> Result[None, object]:
    """Call `fn(slot)` for a callable reporting success as a bool. True is Ok(None)."""
    slot = ErrorSlot()
    caller = sys._getframe(1)
    if fn(slot):
        return Ok(None)
    return Err(_slot_error(slot, caller, function, file, line))


def _slot_error(
    slot: ErrorSlot,
    caller: FrameType,
    function: str | None,
    file: str | None,
    line: int | None,
) -> object:
    if slot.error is not None:
        if should_log_captured(logger):
            logger.debug("callee reported %r", slot.error)
        return slot.error
    # Callee failed silently; attribute the failure to the bridging call site.
    made: ResultError = error(
        function=function if function is not None else caller.f_code.co_name,
        file=file if file is not None else caller.f_code.co_filename,
        line=line if line is not None else caller.f_lineno,
    )
    if should_log_captured(logger):
        logger.debug("callee failed without an error at %s", made.location)
    return made
