"""
Utils for combinatorial problems.
"""

import math
from typing import Sequence, Tuple

from lehmer.core import DegenerateAlphabetError, Direction


def radices(size: int, direction: Direction) -> Tuple[Sequence[int], int]:
    """
    Mixed radix bases of the factorial number system for
    permutations of `size` symbols.

    Based on https://en.wikipedia.org/wiki/Factorial_number_system.

    Args:
        size: the number of symbols being permuted.
        direction: which end of the radix sequence is consumed first.

    Returns:
        The divisors, in the order they are applied to an index,
        and the exclusive bound of the quotient left after the last division.
    """
    if size < 2:
        raise DegenerateAlphabetError(
            f"The Lehmer code of fewer than two symbols is meaningless. Got: {size}"
        )
    if direction == Direction.INCREASING:
        return tuple(range(2, size)), size
    return tuple(range(size, 2, -1)), 2


def permutation_count(size: int) -> int:
    """
    Number of arrangements of `size` distinct symbols, i.e. size!.
    """
    return math.factorial(size)
