"""
Salt-free Sqids-style codec.

The alphabet is shuffled once at construction. Each id starts with a prefix
character chosen from the input numbers; numbers are written in base N-1 and
joined by the first character of the working alphabet, which is reshuffled
after every number. Blocked ids are regenerated with the next prefix offset.
With an empty blocklist the output matches the reference ``sqids`` library.
"""
import logging
import sys
from typing import List, Optional, Sequence

from sqids.constants import DEFAULT_ALPHABET

from .alphabet import Alphabet
from .blocklist import Blocklist, should_check_blocklist
from .errors import InvalidAlphabetError, InvalidConfigurationError, InvalidInputError, MaxAttemptsError

logger = logging.getLogger(__name__)

MAX_INT = sys.maxsize
MAX_MIN_LENGTH = 255


def shuffle(codes: List[int]) -> List[int]:
    """Deterministically permute ``codes`` in place, keyed by the codes themselves."""
    length = len(codes)
    i, j = 0, length - 1
    while j > 0:
        r = (i * j + codes[i] + codes[j]) % length
        codes[i], codes[r] = codes[r], codes[i]
        i += 1
        j -= 1
    return codes


class SqidsCodec:
    """Encode lists of integers in ``[0, MAX_INT]`` to Sqids-style strings and back."""

    def __init__(
        self,
        alphabet: Optional[Alphabet] = None,
        min_length: int = 0,
        blocklist: Optional[Blocklist] = None,
        blocklist_mode: str = "length_threshold",
        blocklist_max_length: int = 32,
    ):
        alphabet = alphabet if alphabet is not None else Alphabet(DEFAULT_ALPHABET)
        if not alphabet.characters.isascii():
            raise InvalidAlphabetError("Alphabet cannot contain multibyte characters")
        if not isinstance(min_length, int) or isinstance(min_length, bool) or not 0 <= min_length <= MAX_MIN_LENGTH:
            raise InvalidConfigurationError(f"Minimum length has to be between 0 and {MAX_MIN_LENGTH}")

        self.min_length = min_length
        self.blocklist = (blocklist or Blocklist.empty()).filter_for_alphabet(alphabet)
        self.blocklist_mode = blocklist_mode
        self.blocklist_max_length = blocklist_max_length

        logger.debug("Shuffling a %d character alphabet", len(alphabet))
        self._alphabet: List[int] = shuffle(alphabet.ordinals())

    # ==================================================
    # ENCODE
    # ==================================================

    def encode(self, numbers: Sequence[int]) -> str:
        """Encode ``numbers``, regenerating blocked ids.

        Raises InvalidInputError for numbers outside ``[0, MAX_INT]`` and
        MaxAttemptsError once every prefix offset has produced a blocked id.
        """
        if not numbers:
            return ""
        if any(not 0 <= n <= MAX_INT for n in numbers):
            raise InvalidInputError(f"Encoding supports numbers between 0 and {MAX_INT}")

        increment = 0
        while True:
            if increment > len(self._alphabet):
                raise MaxAttemptsError("Reached max attempts to re-generate the ID")

            encoded = self._encode(numbers, increment)
            if not self._is_blocked(encoded):
                return encoded

            logger.debug("Generated id is blocked, retrying with increment %d", increment + 1)
            increment += 1

    def _base_offset(self, numbers: Sequence[int]) -> int:
        alphabet = self._alphabet
        length = len(alphabet)
        offset = sum(alphabet[n % length] + i for i, n in enumerate(numbers))
        return (len(numbers) + offset) % length

    def _encode(self, numbers: Sequence[int], increment: int) -> str:
        length = len(self._alphabet)
        offset = (self._base_offset(numbers) + increment) % length

        alphabet = self._alphabet[offset:] + self._alphabet[:offset]
        code = [alphabet[0]]
        alphabet.reverse()

        for i, num in enumerate(numbers):
            code.extend(self._to_id(num, alphabet))
            if i < len(numbers) - 1:
                code.append(alphabet[0])
                shuffle(alphabet)

        if len(code) < self.min_length:
            code.append(alphabet[0])
            while len(code) < self.min_length:
                shuffle(alphabet)
                code.extend(alphabet[:min(self.min_length - len(code), length)])

        return "".join(chr(c) for c in code)

    @staticmethod
    def _to_id(num: int, alphabet: List[int]) -> List[int]:
        # The first character is reserved as the separator, digits use the rest.
        base = len(alphabet) - 1
        digits = []
        while True:
            digits.append(alphabet[num % base + 1])
            num //= base
            if num <= 0:
                break
        digits.reverse()
        return digits

    def _is_blocked(self, encoded_id: str) -> bool:
        if not self.blocklist:
            return False
        if not should_check_blocklist(self.blocklist_mode, len(encoded_id), self.blocklist_max_length):
            return False
        return self.blocklist.blocks_id(encoded_id) is not None

    # ==================================================
    # DECODE
    # ==================================================

    def decode(self, encoded_id: str) -> List[int]:
        """Decode ``encoded_id``; anything this codec would not produce gives ``[]``."""
        if not encoded_id:
            return []

        codes = [ord(c) for c in encoded_id]
        if any(code not in self._alphabet for code in codes):
            return []

        length = len(self._alphabet)
        offset = self._alphabet.index(codes[0])
        alphabet = self._alphabet[offset:] + self._alphabet[:offset]
        alphabet.reverse()

        numbers = []
        rest = codes[1:]
        while rest:
            separator = alphabet[0]
            if separator in rest:
                cut = rest.index(separator)
                chunk, rest, more = rest[:cut], rest[cut + 1:], True
            else:
                chunk, rest, more = rest, [], False

            if not chunk:
                break
            numbers.append(self._to_number(chunk, alphabet))
            if more:
                shuffle(alphabet)

        if not numbers or any(n > MAX_INT for n in numbers):
            return []

        # Re-encode at the prefix offset the id was generated with.
        increment = (offset - self._base_offset(numbers)) % length
        if self._encode(numbers, increment) != encoded_id:
            return []
        # encode only reaches a later offset when every earlier one was blocked.
        if any(not self._is_blocked(self._encode(numbers, earlier)) for earlier in range(increment)):
            return []
        return numbers

    @staticmethod
    def _to_number(chunk: List[int], alphabet: List[int]) -> int:
        base = len(alphabet) - 1
        num = 0
        for code in chunk:
            num = num * base + alphabet.index(code) - 1
        return num

    def __repr__(self) -> str:
        return f"<SqidsCodec min_length: {self.min_length} blocklist: {len(self.blocklist)}>"
