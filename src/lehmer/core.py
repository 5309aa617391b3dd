"""
This module defines core abstractions.
"""

import enum


class Direction(enum.Enum):
    """
    Order in which radices are consumed when extracting digits.

    INCREASING: divide by 2, 3, ..., n - 1; the leading digit is below n.
    DECREASING: divide by n, n - 1, ..., 3; the leading digit is below 2.
    """

    INCREASING = "inc"
    DECREASING = "dec"

    @property
    def label(self) -> str:
        """
        Short label used when rendering codes.
        """
        return self.value


class LehmerError(ValueError):
    """
    Base class for validation failures.
    """


class EmptyAlphabetError(LehmerError):
    """
    Raised when a charset is built from no symbols.
    """


class DuplicateSymbolError(LehmerError):
    """
    Raised when a charset is built from repeated symbols.
    """


class DegenerateAlphabetError(LehmerError):
    """
    Raised when ranking against a single symbol charset.
    """


class IndexOutOfRangeError(LehmerError):
    """
    Raised when an index has no code for a given charset size.
    """
