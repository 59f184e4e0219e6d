class OneTimePadError(Exception):
    """Base class for errors raised whilst working with one time pads."""


class PadBufferNotLongEnough(OneTimePadError):
    """The pad buffer holds fewer indices than the input has symbols.

    Push more characters to the pad buffer with `push_to_pad` or use a
    shorter input string. Nothing was consumed, so the same input can be
    retried.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            "The pad buffer isn't long enough for the input string to be processed."
        )


class CharacterNotInAlphabet(OneTimePadError):
    """One of the characters given is not in the alphabet of the pad."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"The character '{symbol}' is not in the alphabet of this one time pad."
        )


class InvalidAlphabet(OneTimePadError, ValueError):
    pass


class InvalidPadIndex(OneTimePadError, ValueError):
    pass


class PadSourceError(OneTimePadError):
    """The random index source raised while generating pad material."""
