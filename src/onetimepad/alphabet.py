from typing import Iterable, Iterator, Optional

from onetimepad.errors import CharacterNotInAlphabet, InvalidAlphabet

# Printable ASCII without control characters. The order is part of the
# encode/decode contract: both ends of a conversation must use it.
DEFAULT_ALPHABET = (
    " 1234567890!@#$%^&*()`~-_=+"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "[]{}\\|;:'\",.<>/?"
)


class Alphabet:
    """Ordered, duplicate-free sequence of symbols defining the index space.

    The first symbol is numbered 0 and the numbering increases with the
    position of the symbol in the sequence.
    """

    __slots__ = ("__symbols", "__indices")

    def __init__(self, symbols: Optional[Iterable[str]] = None):
        symbols = tuple(DEFAULT_ALPHABET if symbols is None else symbols)
        if not symbols:
            raise InvalidAlphabet("An alphabet must contain at least one symbol")

        indices = {}
        for index, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidAlphabet(f"Alphabet symbols must be single characters: {symbol!r}")
            if symbol in indices:
                raise InvalidAlphabet(f"Duplicate symbol in alphabet: {symbol!r}")
            indices[symbol] = index

        self.__symbols = symbols
        self.__indices = indices

    def index_of(self, symbol: str) -> int:
        """Return the zero-based position of `symbol`."""
        try:
            return self.__indices[symbol]
        except KeyError:
            raise CharacterNotInAlphabet(symbol) from None

    def symbol_at(self, index: int) -> str:
        """Return the symbol at `index`, wrapping around the alphabet length."""
        return self.__symbols[index % len(self.__symbols)]

    def __len__(self) -> int:
        return len(self.__symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.__indices

    def __iter__(self) -> Iterator[str]:
        return iter(self.__symbols)

    def __str__(self) -> str:
        return "".join(self.__symbols)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.__symbols == other.__symbols

    def __hash__(self) -> int:
        return hash(self.__symbols)
