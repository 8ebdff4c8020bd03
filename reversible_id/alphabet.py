"""
Character sets used as the digits of the encoded id numeral systems.

An Alphabet is an ordered, de-duplicated set of characters plus an optional
map of "equivalent" input characters. Equivalences let decode accept visually
confusable characters (``o`` for ``0``, ``l`` for ``1``...) which are mapped to
their canonical alphabet character before decoding.
"""
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .errors import InvalidAlphabetError


class Alphabet:
    """Immutable, validated character set with optional character equivalences."""

    # Absolute floor; codecs enforce their own (larger) minimums.
    MIN_UNIQUE_CHARACTERS = 3

    __slots__ = ("_characters", "_unique_characters", "_equivalences")

    def __init__(self, characters: Union[str, Sequence[str]], equivalences: Optional[Dict[str, str]] = None):
        if not isinstance(characters, (str, list, tuple)) or len(characters) == 0:
            raise InvalidAlphabetError("Alphabet must be a populated string or list of characters")

        unique = self._unique_characters_of(characters)
        if any(c.isspace() or not c.isprintable() for c in unique):
            raise InvalidAlphabetError("Alphabet must not contain whitespace or control characters.")
        if len(unique) < self.MIN_UNIQUE_CHARACTERS:
            raise InvalidAlphabetError(
                f"Alphabet must contain at least {self.MIN_UNIQUE_CHARACTERS} unique characters."
            )
        if not self._valid_equivalences(unique, equivalences):
            raise InvalidAlphabetError(
                "Character equivalences must be a dict or None and map single characters "
                "outside the alphabet to characters in the alphabet."
            )

        self._unique_characters: Tuple[str, ...] = tuple(unique)
        self._characters = "".join(unique)
        self._equivalences = dict(equivalences) if equivalences else None

    # ==================================================
    # PRESETS
    # ==================================================

    @classmethod
    def modified_crockford(cls) -> "Alphabet":
        """Lowercase Crockford base32 (no ``i``, ``l`` or ``o``); those decode as look-alikes."""
        return cls("0123456789abcdefghjkmnpqrstuvwxyz", {"o": "0", "i": "j", "l": "1"})

    @classmethod
    def alphanum(cls) -> "Alphabet":
        return cls("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890")

    # ==================================================
    # ACCESSORS
    # ==================================================

    @property
    def characters(self) -> str:
        return self._characters

    @property
    def unique_characters(self) -> Tuple[str, ...]:
        return self._unique_characters

    @property
    def equivalences(self) -> Optional[Dict[str, str]]:
        return dict(self._equivalences) if self._equivalences else None

    @property
    def size(self) -> int:
        return len(self._unique_characters)

    def ordinals(self) -> List[int]:
        """Return a fresh list of the characters' code points."""
        return [ord(c) for c in self._unique_characters]

    def map_equivalents(self, text: str) -> str:
        """Replace every equivalence key in ``text`` with its canonical character."""
        if not self._equivalences:
            return text
        return text.translate(str.maketrans(self._equivalences))

    def __contains__(self, character: object) -> bool:
        return character in self._unique_characters

    def __iter__(self) -> Iterator[str]:
        return iter(self._unique_characters)

    def __len__(self) -> int:
        return len(self._unique_characters)

    def __str__(self) -> str:
        return self._characters

    def __repr__(self) -> str:
        return f"<Alphabet chars: {self._characters!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._characters == other._characters and self._equivalences == other._equivalences

    def __hash__(self) -> int:
        equivalences = tuple(sorted(self._equivalences.items())) if self._equivalences else None
        return hash((self._characters, equivalences))

    # ==================================================
    # VALIDATION
    # ==================================================

    @staticmethod
    def _unique_characters_of(characters: Iterable[str]) -> List[str]:
        unique: List[str] = []
        seen = set()
        for character in characters:
            if not isinstance(character, str) or len(character) != 1:
                raise InvalidAlphabetError("Alphabet entries must be single characters")
            if character not in seen:
                seen.add(character)
                unique.append(character)
        return unique

    @staticmethod
    def _valid_equivalences(unique: List[str], equivalences: Optional[Dict[str, str]]) -> bool:
        if equivalences is None:
            return True
        if not isinstance(equivalences, dict):
            return False
        for key, value in equivalences.items():
            if not isinstance(key, str) or not isinstance(value, str):
                return False
            if len(key) != 1 or len(value) != 1:
                return False
            if key in unique or value not in unique:
                return False
        return True
