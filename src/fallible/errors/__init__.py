"""Error values for results that have no domain error of their own.

- ResultError: location-tagged failure reason
- error(): build a ResultError tagged with the caller's location
- UnwrapError/ResultException: raised by the explicit extractors
"""

from .errors import ResultError, ResultException, UnwrapError, error

__all__ = ["ResultError", "ResultException", "UnwrapError", "error"]
