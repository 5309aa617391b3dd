"""
Lehmer codes: the factorial number system digits of a permutation's rank.

An index in [0, n!) is written as a mixed radix number, extracting
digits by repeated division. E.g. with n = 5 and index 119:

  - increasing: 119 / 2, / 3, / 4 -> remainders 1, 2, 3, quotient 4 -> 4 3 2 1
  - decreasing: 119 / 5, / 4, / 3 -> remainders 4, 3, 2, quotient 1 -> 1 2 3 4

Digits are kept most significant first.
"""

import dataclasses
from typing import Any, List, Tuple

from lehmer import combinatorics, npsci
from lehmer.charset import CharSet
from lehmer.core import DegenerateAlphabetError, Direction, IndexOutOfRangeError


@dataclasses.dataclass(frozen=True)
class LehmerCodeValue:
    """
    Digits of an index in the factorial number system, tagged with
    the direction used to extract them.
    """

    direction: Direction
    digits: Tuple[int, ...]

    @classmethod
    def from_decimal(
        cls, index: Any, charset: CharSet, direction: Direction
    ) -> "LehmerCodeValue":
        """
        See `from_decimal`.
        """
        return from_decimal(index, charset=charset, direction=direction)

    @property
    def size(self) -> int:
        """
        Returns the size of the charset the code was built for.
        """
        return len(self.digits) + 1

    @property
    def is_increasing(self) -> bool:
        return self.direction == Direction.INCREASING

    def __str__(self) -> str:
        return format_code(self)


def from_decimal(
    index: Any, charset: CharSet, direction: Direction
) -> LehmerCodeValue:
    """
    Computes the Lehmer code of `index` for permutations of `charset`.

    Only the size of the charset matters. The number of permutations
    is never computed; an index is out of range when the quotient left
    after the last division reaches the leading digit's radix.

    Args:
        index: a non-negative integer, python or numpy.
        charset: the symbols being permuted.
        direction: the order radices are consumed in.

    Returns:
        A `LehmerCodeValue` with `len(charset) - 1` digits.

    Raises:
        DegenerateAlphabetError: if the charset has a single symbol.
        IndexOutOfRangeError: if index is negative or not below len(charset)!.
    """
    num = npsci.as_index(index)
    size = charset.size
    if size == 1:
        raise DegenerateAlphabetError("The Lehmer code of a single symbol is meaningless")

    divisors, bound = combinatorics.radices(size, direction)
    digits: List[int] = []
    for radix in divisors:
        num, remainder = divmod(num, radix)
        digits.append(remainder)

    if num >= bound:
        raise IndexOutOfRangeError(
            f"Index {index} is larger than the number of permutations of {size} symbols"
        )
    digits.append(num)
    digits.reverse()
    return LehmerCodeValue(direction=direction, digits=tuple(digits))


def format_code(value: LehmerCodeValue) -> str:
    """
    Renders a code as its direction label followed by space separated digits.
    E.g. `L(inc): 4 3 2 1`.
    """
    digits = " ".join(str(digit) for digit in value.digits)
    return f"L({value.direction.label}): {digits}"
