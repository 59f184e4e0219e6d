import logging

from onetimepad.alphabet import DEFAULT_ALPHABET, Alphabet
from onetimepad.errors import (
    CharacterNotInAlphabet,
    InvalidAlphabet,
    InvalidPadIndex,
    OneTimePadError,
    PadBufferNotLongEnough,
    PadSourceError,
)
from onetimepad.pad import EncodingResult, OneTimePad

logging.getLogger("onetimepad").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "CharacterNotInAlphabet",
    "EncodingResult",
    "InvalidAlphabet",
    "InvalidPadIndex",
    "OneTimePad",
    "OneTimePadError",
    "PadBufferNotLongEnough",
    "PadSourceError",
]
