"""
Charsets: the ordered alphabet whose permutations are ranked.

Symbols are unicode codepoints, so multi-byte characters
(e.g. "你", "！") count as a single symbol.
"""

from typing import Iterable, Iterator, Sequence, Tuple

from lehmer.core import DuplicateSymbolError, EmptyAlphabetError


class CharSet:
    """
    A non-empty set of distinct symbols, sorted in ascending order.
    """

    def __init__(self, symbols: Iterable[str]):
        """
        Args:
            symbols: single codepoint strings, in any order.

        Raises:
            EmptyAlphabetError: if `symbols` is empty.
            DuplicateSymbolError: if any symbol is repeated.
            ValueError: if an element isn't a single codepoint.
        """
        symbols = tuple(symbols)
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"Symbols must be single characters. Got: {symbol!r}")
        self._symbols = normalize(symbols)

    @classmethod
    def from_str(cls, text: str) -> "CharSet":
        """
        Creates a charset from the codepoints of `text`.
        """
        return cls(text)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "CharSet":
        """
        Creates a charset from single codepoint strings.
        See `CharSet.__init__`.
        """
        return cls(symbols)

    @property
    def symbols(self) -> Tuple[str, ...]:
        """
        Returns the sorted, distinct symbols.
        """
        return self._symbols

    @property
    def size(self) -> int:
        """
        Returns the number of symbols.
        """
        return len(self._symbols)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharSet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"CharSet({''.join(self._symbols)!r})"


def normalize(symbols: Sequence[str]) -> Tuple[str, ...]:
    """
    Sorts symbols and drops adjacent duplicates.

    Raises:
        EmptyAlphabetError: if there are no symbols.
        DuplicateSymbolError: if the number of symbols shrinks.
    """
    ordered = sorted(symbols)
    distinct = []
    for symbol in ordered:
        if not distinct or distinct[-1] != symbol:
            distinct.append(symbol)

    if len(distinct) == 0:
        raise EmptyAlphabetError("Given no symbols, so there is no permutation")
    if len(distinct) != len(ordered):
        raise DuplicateSymbolError(
            f"Given duplicated symbols: {len(ordered) - len(distinct)} repeats"
        )
    return tuple(distinct)
