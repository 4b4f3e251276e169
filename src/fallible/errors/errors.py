"""Error values and the exceptions raised by the explicit extractors.

`ResultError` is a generic failure reason for code that has no domain error
of its own. It records where it was made (function, file, line) so a bare
failure can still be traced back to its origin.
"""

from __future__ import annotations

import sys
import traceback
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from fallible.config import get_settings


class ResultError(BaseModel):
    """Structured, location-tagged failure reason."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    domain: str = Field(default_factory=lambda: get_settings().error_domain)
    code: int = 0
    message: str | None = None
    function: str | None = None
    file: str | None = None
    line: int | None = None
    details: str | None = Field(default=None, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException, *, code: int = 0) -> Self:
        """Build from an exception. Traceback text lands in `details` when configured."""
        frame = exc.__traceback__
        while frame is not None and frame.tb_next is not None:
            frame = frame.tb_next
        code_obj = frame.tb_frame.f_code if frame is not None else None
        return cls(
            code=code,
            message=str(exc) or type(exc).__name__,
            function=code_obj.co_name if code_obj else None,
            file=code_obj.co_filename if code_obj else None,
            line=frame.tb_lineno if frame is not None else None,
            details="".join(traceback.format_exception(exc)) if get_settings().capture_traceback else None,
        )

    @property
    def location(self) -> str:
        """`file:line in function`, with missing parts left out."""
        where = f"{self.file}:{self.line}" if self.file and self.line is not None else self.file or ""
        if self.function:
            return f"{where} in {self.function}" if where else self.function
        return where

    def __str__(self) -> str:
        msg = self.message or f"{self.domain} error {self.code}"
        loc = self.location
        return f"{msg} ({loc})" if loc else msg


def error(
    message: str | None = None,
    *,
    function: str | None = None,
    file: str | None = None,
    line: int | None = None,
    code: int = 0,
) -> ResultError:
    """Construct a ResultError tagged with the caller's location.

    Each of `function`, `file` and `line` defaults to the calling frame.
    Pass them explicitly to attribute the error elsewhere.

    Example:
        >>> def load() -> ResultError:
        ...     return error("missing config")
        >>> load().function
        'load'
    """
    caller = sys._getframe(1)
    return ResultError(
        code=code,
        message=message,
        function=function if function is not None else caller.f_code.co_name,
        file=file if file is not None else caller.f_code.co_filename,
        line=line if line is not None else caller.f_lineno,
    )


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong variant."""

    __slots__ = ("payload",)

    def __init__(self, message: str, payload: object) -> None:
        self.payload = payload
        super().__init__(message)


class ResultException(Exception):
    """Carries a non-exception error out of `dematerialize`."""

    __slots__ = ("error",)

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(str(error))
