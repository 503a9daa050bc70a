"""Exceptions raised by gps2ned"""

__all__ = [
    'ConfigError', 'FixtureMismatch', 'Gps2NedError', 'ParseError', 'ValidationError'
]

from typing import List, NamedTuple, Optional, Tuple


class Gps2NedError(ValueError):
    """Base class for all gps2ned errors"""


class ParseError(Gps2NedError):
    """
    Raised when a sexagesimal string does not match the fixed format.

    Args:
        field:
            Which value failed to parse, e.g. 'latitude' or 'longitude'

        value:
            The offending input

        reason:
            A short description of the problem
    """

    def __init__(self, field: str, value: str, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f'Invalid {field} {value!r}: {reason}')


class ConfigError(Gps2NedError):
    """Raised for invalid ellipsoid parameters"""


class FixtureMismatch(NamedTuple):
    """A single failed fixture comparison. Index is 1-based."""
    index: int
    expected: Optional[Tuple[float, float]]
    actual: Optional[Tuple[float, float]]


class ValidationError(Gps2NedError):
    """Raised when computed values do not match fixture expectations"""

    def __init__(self, failures: List[FixtureMismatch], message: Optional[str] = None):
        self.failures = list(failures)
        if message is None:
            message = '; '.join(f'Test {x.index} failed' for x in self.failures)
        super().__init__(message)

    @property
    def index(self) -> Optional[int]:
        """The 1-based index of the first failing case, if any"""
        return self.failures[0].index if self.failures else None
