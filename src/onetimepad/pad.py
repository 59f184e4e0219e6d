from __future__ import annotations

import itertools
import threading
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from onetimepad.alphabet import Alphabet
from onetimepad.errors import (
    CharacterNotInAlphabet,
    InvalidPadIndex,
    OneTimePadError,
    PadBufferNotLongEnough,
    PadSourceError,
)
from onetimepad.logs import get_logger
from onetimepad.pad_source import DEFAULT_RANDOM_INDEX, RandomIndexFn

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EncodingResult:
    """The result of an encoding operation from `OneTimePad`."""

    cipher_text: str
    # The pad symbols consumed by the encoding operation.
    pad: str


class OneTimePad:
    """State of a one time pad: an alphabet and a FIFO buffer of pad indices.

    Every operation validates its whole input before touching the buffer, so a
    failed call leaves the buffer exactly as it was.

    Encoding with the default alphabet:

        otp = OneTimePad()
        otp.push_to_pad("8t5l!Ok2v$q4e3/S3dOLztDY")
        res = otp.encode("Never gonna give you up.")
        print(res.cipher_text)

    Decoding with the default alphabet:

        otp = OneTimePad()
        otp.push_to_pad("kgx:?exP2B8")
        print(otp.decode("g2Vt1~.UjTq"))
    """

    def __init__(
        self,
        alphabet: Optional[Union[Alphabet, Iterable[str]]] = None,
        random_index: Optional[RandomIndexFn] = None,
    ) -> None:
        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)
        self._alphabet = alphabet
        self._random_index = random_index or DEFAULT_RANDOM_INDEX
        self._pad_buffer: deque[int] = deque()
        self._lock = threading.RLock()

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def pad_length(self) -> int:
        """Number of pad indices waiting to be consumed."""
        with self._lock:
            return len(self._pad_buffer)

    def __len__(self) -> int:
        return self.pad_length

    def peek_pad(self, count: Optional[int] = None) -> str:
        """Render the next `count` queued pad indices as symbols without consuming them."""
        with self._lock:
            if count is None:
                count = len(self._pad_buffer)
            return "".join(
                self._alphabet.symbol_at(p) for p in itertools.islice(self._pad_buffer, count)
            )

    def copy(self) -> OneTimePad:
        """Return an independent pad with the same alphabet and buffer contents."""
        with self._lock:
            other = OneTimePad(self._alphabet, self._random_index)
            other._pad_buffer.extend(self._pad_buffer)
            return other

    def _resolve(self, text: str) -> List[int]:
        """Map every symbol of `text` to its index, or raise before anything changes."""
        return [self._alphabet.index_of(symbol) for symbol in text]

    def _check_pad_length(self, required: int) -> None:
        available = len(self._pad_buffer)
        if available < required:
            raise PadBufferNotLongEnough(required, available)

    def push_to_pad(self, extra_pad_characters: str) -> None:
        """Append pad characters to the end of the buffer.

        Raises `CharacterNotInAlphabet` if any character is not in the
        alphabet, in which case nothing is appended.
        """
        with self._lock:
            try:
                indices = self._resolve(extra_pad_characters)
            except CharacterNotInAlphabet as e:
                log.warning("pad push rejected", error=type(e).__name__, symbol=e.symbol)
                raise
            self._pad_buffer.extend(indices)
            log.debug("pad pushed", count=len(indices), pad_length=len(self._pad_buffer))

    def generate_pad(self, size: int) -> None:
        """Append `size` random indices capable of encoding or decoding `size` symbols.

        The indices come from the injected random index source, which is not
        guaranteed to be secure.
        """
        if size < 0:
            raise ValueError(f"Pad size must not be negative: {size}")

        alphabet_length = len(self._alphabet)
        with self._lock:
            indices = []
            for _ in range(size):
                try:
                    index = self._random_index(alphabet_length)
                except Exception as e:
                    raise PadSourceError(f"Random index source failed: {e}") from e
                if not isinstance(index, int) or not 0 <= index < alphabet_length:
                    raise InvalidPadIndex(
                        f"Random index source returned {index}, expected a value in [0, {alphabet_length})"
                    )
                indices.append(index)
            self._pad_buffer.extend(indices)
            log.debug("pad generated", count=size, pad_length=len(self._pad_buffer))

    def clear_pad(self) -> None:
        """Empty the pad buffer completely."""
        with self._lock:
            discarded = len(self._pad_buffer)
            self._pad_buffer.clear()
            log.debug("pad cleared", discarded=discarded)

    def _prepare(self, text: str, operation: str) -> List[int]:
        """Check the buffer length and the input symbols without consuming any pad."""
        try:
            self._check_pad_length(len(text))
            return self._resolve(text)
        except OneTimePadError as e:
            log.warning(
                f"{operation} rejected",
                error=type(e).__name__,
                symbol=getattr(e, "symbol", None),
                pad_length=len(self._pad_buffer),
            )
            raise

    def encode(self, plain_text: str) -> EncodingResult:
        """Encode a string to cipher text.

        Raises `PadBufferNotLongEnough` if the pad holds fewer characters than
        the input, or `CharacterNotInAlphabet` if the input contains a
        character outside the alphabet. In either case the pad is unchanged.
        """
        with self._lock:
            values = self._prepare(plain_text, "encode")

            length = len(self._alphabet)
            cipher_text = []
            pad = []
            for v in values:
                p = self._pad_buffer.popleft()
                c = (v - p) % length
                cipher_text.append(self._alphabet.symbol_at(c))
                pad.append(self._alphabet.symbol_at(p))

            log.debug("encoded", count=len(values), pad_length=len(self._pad_buffer))
            return EncodingResult(cipher_text="".join(cipher_text), pad="".join(pad))

    def decode(self, cipher_text: str) -> str:
        """Decode cipher text back to plain text.

        Fails under the same conditions as `encode`, again leaving the pad
        unchanged.
        """
        with self._lock:
            values = self._prepare(cipher_text, "decode")

            length = len(self._alphabet)
            plain_text = []
            for v in values:
                p = self._pad_buffer.popleft()
                c = (v + p) % length
                plain_text.append(self._alphabet.symbol_at(c))

            log.debug("decoded", count=len(values), pad_length=len(self._pad_buffer))
            return "".join(plain_text)
