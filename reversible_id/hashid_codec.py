"""
Salted Hashids-style codec.

Each number is written in base-N with an alphabet permutation seeded by a
"lottery" character (derived from all the input numbers) and the salt. Numbers
are joined by separator characters and short ids are padded with guards and
then with alphabet characters up to the minimum length. Output is compatible
with the reference ``hashids`` library for the same salt, alphabet and
minimum length.
"""
import logging
import threading
from typing import List, Optional, Sequence

from .alphabet import Alphabet
from .blocklist import Blocklist, should_check_blocklist
from .errors import BlocklistError, InvalidConfigurationError, InvalidInputError
from .separators import AlphabetSeparatorGuards
from .shuffle import consistent_shuffle

logger = logging.getLogger(__name__)


class HashidCodec:
    """Encode lists of non-negative integers to salted Hashids-style strings and back."""

    def __init__(
        self,
        salt: str,
        min_length: int = 0,
        alphabet: Optional[Alphabet] = None,
        blocklist: Optional[Blocklist] = None,
        blocklist_mode: str = "length_threshold",
        blocklist_max_length: int = 32,
    ):
        if not isinstance(min_length, int) or isinstance(min_length, bool) or min_length < 0:
            raise InvalidConfigurationError("The min length must be an integer greater than or equal to 0")

        self.salt = salt
        self.min_length = min_length
        self.alphabet = alphabet if alphabet is not None else Alphabet.alphanum()
        self.blocklist = blocklist
        self.blocklist_mode = blocklist_mode
        self.blocklist_max_length = blocklist_max_length

        self._partition: Optional[AlphabetSeparatorGuards] = None
        self._partition_lock = threading.Lock()

    @property
    def partition(self) -> AlphabetSeparatorGuards:
        """The alphabet/separator/guard split, derived on first use and then reused."""
        if self._partition is None:
            with self._partition_lock:
                if self._partition is None:
                    logger.debug("Deriving separators and guards for a %d character alphabet", len(self.alphabet))
                    self._partition = AlphabetSeparatorGuards(self.alphabet, self.salt)
        return self._partition

    # ==================================================
    # ENCODE
    # ==================================================

    def encode(self, numbers: Sequence[int]) -> str:
        """Encode ``numbers``; empty input or any negative number gives ``""``.

        Raises BlocklistError when the id contains a blocklisted word and the
        blocklist mode asks for a check. There is no retry.
        """
        if not numbers or any(n < 0 for n in numbers):
            return ""

        encoded = self._encode(numbers)

        if self.blocklist and should_check_blocklist(self.blocklist_mode, len(encoded), self.blocklist_max_length):
            blocked_word = self.blocklist.blocks(encoded)
            if blocked_word:
                logger.warning("Rejected generated id containing blocklisted word '%s'", blocked_word)
                raise BlocklistError(encoded, blocked_word)

        return encoded

    def _encode(self, numbers: Sequence[int]) -> str:
        partition = self.partition
        alphabet = list(partition.alphabet)
        separators = partition.separators
        guards = partition.guards
        alphabet_length = len(alphabet)

        hash_int = sum(n % (i + 100) for i, n in enumerate(numbers))
        lottery = alphabet[hash_int % alphabet_length]

        code = [lottery]
        seasoning = [lottery, *partition.salt]

        for i, num in enumerate(numbers):
            consistent_shuffle(alphabet, seasoning, alphabet.copy(), alphabet_length)
            first_digit = self._hash_number(code, num, alphabet)

            if i + 1 < len(numbers):
                num %= first_digit + i
                code.append(separators[num % len(separators)])

        if len(code) < self.min_length:
            code.insert(0, guards[(hash_int + code[0]) % len(guards)])

            if len(code) < self.min_length:
                third = code[2] if len(code) > 2 else 0
                code.append(guards[(hash_int + third) % len(guards)])

        half_length = alphabet_length // 2
        while len(code) < self.min_length:
            consistent_shuffle(alphabet, alphabet.copy(), None, alphabet_length)
            code = alphabet[half_length:] + code + alphabet[:half_length]

            excess = len(code) - self.min_length
            if excess > 0:
                start = excess // 2
                code = code[start:start + self.min_length]

        return "".join(chr(c) for c in code)

    @staticmethod
    def _hash_number(code: List[int], num: int, alphabet: List[int]) -> int:
        """Append ``num`` in base-len(alphabet) to ``code``; return the most significant digit."""
        base = len(alphabet)
        digits = []
        while True:
            digits.append(alphabet[num % base])
            num //= base
            if num <= 0:
                break
        digits.reverse()
        code.extend(digits)
        return digits[0]

    # ==================================================
    # DECODE
    # ==================================================

    def decode(self, encoded_id: str) -> List[int]:
        """Decode ``encoded_id``; strings this codec could not have produced give ``[]``.

        Raises InvalidInputError if a number segment holds a character outside
        the alphabet.
        """
        if not encoded_id:
            return []

        partition = self.partition
        parts = _split_on(encoded_id, partition.guards)
        if not parts:
            return []

        body = parts[1] if len(parts) in (2, 3) else parts[0]
        lottery = ord(body[0])
        segments = _split_on(body[1:], partition.separators)

        alphabet = list(partition.alphabet)
        seasoning = [lottery, *partition.salt]
        numbers = []
        for segment in segments:
            consistent_shuffle(alphabet, seasoning, alphabet.copy(), len(alphabet))
            numbers.append(self._unhash(segment, alphabet))

        if not numbers:
            return []

        # Only ids this codec would produce are accepted.
        if self._encode(numbers) != encoded_id:
            return []
        return numbers

    @staticmethod
    def _unhash(segment: str, alphabet: List[int]) -> int:
        base = len(alphabet)
        num = 0
        for character in segment:
            try:
                position = alphabet.index(ord(character))
            except ValueError:
                raise InvalidInputError("unable to unhash") from None
            num = num * base + position
        return num

    def __repr__(self) -> str:
        return f"<HashidCodec min_length: {self.min_length} alphabet: {self.alphabet.characters!r}>"


def _split_on(text: str, delimiters: Sequence[int]) -> List[str]:
    """Split ``text`` on any of the ``delimiters`` code points, dropping empty parts."""
    parts = []
    current = []
    for character in text:
        if ord(character) in delimiters:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(character)
    if current:
        parts.append("".join(current))
    return parts
