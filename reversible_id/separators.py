"""
Partitions a Hashids-style alphabet into three disjoint character sets.

* alphabet: the digits numbers are written with
* separators: divide the encoded numbers of a multi-number id
* guards: padding characters added when an id is below its minimum length

All sets are stored as tuples of code points and never change after
construction.
"""
import math
from typing import List, Tuple

from .alphabet import Alphabet
from .shuffle import consistent_shuffle

SEPARATOR_RATIO = 3.5
GUARD_RATIO = 12.0
DEFAULT_SEPARATORS = "cfhistuCFHISTU"


class AlphabetSeparatorGuards:
    """The salted (alphabet, separators, guards) partition of an Alphabet."""

    def __init__(self, alphabet: Alphabet, salt: str):
        self.salt: Tuple[int, ...] = tuple(ord(c) for c in salt)

        alphabet_codes = alphabet.ordinals()
        separator_codes = [ord(c) for c in DEFAULT_SEPARATORS if c in alphabet]
        alphabet_codes = [code for code in alphabet_codes if code not in separator_codes]

        separator_codes, alphabet_codes = self._balance_separators(separator_codes, alphabet_codes)
        guard_codes, separator_codes, alphabet_codes = self._carve_guards(separator_codes, alphabet_codes)

        self.alphabet: Tuple[int, ...] = tuple(alphabet_codes)
        self.separators: Tuple[int, ...] = tuple(separator_codes)
        self.guards: Tuple[int, ...] = tuple(guard_codes)

    def _balance_separators(self, separators: List[int], alphabet: List[int]) -> Tuple[List[int], List[int]]:
        consistent_shuffle(separators, self.salt, None, len(self.salt))

        if not separators or len(alphabet) / len(separators) > SEPARATOR_RATIO:
            target = math.ceil(len(alphabet) / SEPARATOR_RATIO)
            if target == 1:
                target = 2

            if target > len(separators):
                missing = target - len(separators)
                separators = separators + alphabet[:missing]
                alphabet = alphabet[missing:]
            else:
                separators = separators[:target]

        consistent_shuffle(alphabet, self.salt, None, len(self.salt))
        return separators, alphabet

    @staticmethod
    def _carve_guards(separators: List[int], alphabet: List[int]) -> Tuple[List[int], List[int], List[int]]:
        guard_count = math.ceil(len(alphabet) / GUARD_RATIO)

        # Tiny alphabets cannot spare characters, take the guards from the separators.
        if len(alphabet) < 3:
            return separators[:guard_count], separators[guard_count:], alphabet
        return alphabet[:guard_count], separators, alphabet[guard_count:]

    @property
    def separator_characters(self) -> str:
        return "".join(chr(code) for code in self.separators)

    @property
    def guard_characters(self) -> str:
        return "".join(chr(code) for code in self.guards)

    def __repr__(self) -> str:
        return (
            f"<AlphabetSeparatorGuards alphabet: {len(self.alphabet)} "
            f"separators: {len(self.separators)} guards: {len(self.guards)}>"
        )
