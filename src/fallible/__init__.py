"""fallible: a Result type for composing operations that may fail.

- Result/Ok/Err: success-or-failure values built on one case-analysis primitive
- from_optional/from_throwing/materialize: bridges from None and exceptions
- ResultError/error(): location-tagged errors when no domain error exists
"""

import logging

from .config import FallibleSettings, clear_settings_cache, get_settings
from .errors import ResultError, ResultException, UnwrapError, error
from .monads import (
    Err,
    ErrorSlot,
    NoError,
    Ok,
    Result,
    ResultProtocol,
    both,
    collect_results,
    from_optional,
    from_throwing,
    materialize,
    sequence,
    traverse,
    try_call,
    try_check,
)
from .observability import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    "Result", "ResultProtocol", "Ok", "Err", "NoError", "both",
    # Interop
    "from_optional", "from_throwing", "materialize",
    "ErrorSlot", "try_call", "try_check",
    # Collections
    "sequence", "traverse", "collect_results",
    # Errors
    "ResultError", "ResultException", "UnwrapError", "error",
    # Config
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
