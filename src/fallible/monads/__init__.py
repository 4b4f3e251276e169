"""Result type and its combinator algebra.

Provides a two-variant Result (Ok/Err) where every operation derives from a
single case-analysis primitive:
- Railway-oriented composition via map/flat_map
- Lazy recovery and short-circuiting conjunction
- Bridges from optional values, raising code and error-slot APIs

Example:
    >>> from fallible.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .flat_map(lambda x: Ok(x + 1))
    ... )
    >>> assert result.unwrap() == 11.0
"""

from .bridge import ErrorSlot, try_call, try_check
from .interop import from_optional, from_throwing, materialize
from .protocol import ResultProtocol
from .result import (
    Err,
    NoError,
    Ok,
    Result,
    both,
    collect_results,
    sequence,
    traverse,
)

__all__ = [
    # Core types
    "Result",
    "ResultProtocol",
    "Ok",
    "Err",
    "NoError",
    # Combinators
    "both",
    # Interop
    "from_optional",
    "from_throwing",
    "materialize",
    # Error-slot bridge
    "ErrorSlot",
    "try_call",
    "try_check",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
]
