"""
Blocklists of words that generated ids should not contain.

Words are stored lowercased and every check is case-insensitive. Two match
rules exist: ``blocks`` is plain substring containment (used by the Hashids
codec) while ``blocks_id`` applies the Sqids rules, which are stricter about
short words and words containing digits to keep false positives down.
"""
import re
from typing import FrozenSet, Iterable, Iterator, Literal, Optional, Union

from sqids.constants import DEFAULT_BLOCKLIST

from .alphabet import Alphabet

BlocklistMode = Literal["always", "length_threshold", "raise_if_likely"]

BLOCKLIST_MODES = ("always", "length_threshold", "raise_if_likely")

_DIGIT = re.compile(r"\d")

MINIMAL_WORDS = (
    "ass", "cum", "fag", "fap", "fck", "fuk", "jiz", "pis", "poo", "sex",
    "tit", "xxx", "anal", "anus", "ball", "blow", "butt", "clit", "cock",
    "coon", "cunt", "dick", "dyke", "fart", "fuck", "jerk", "jizz", "jugs",
    "kike", "kunt", "muff", "nigg", "nigr", "piss", "poon", "poop", "porn",
    "pube", "pusy", "quim", "rape", "scat", "scum", "shit", "slut", "suck",
    "turd", "twat", "vag", "wank", "whor",
)


class Blocklist:
    """Immutable set of lowercased blocked words."""

    __slots__ = ("_words",)

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: FrozenSet[str] = frozenset(str(word).lower() for word in (words or ()))

    @classmethod
    def empty(cls) -> "Blocklist":
        return cls()

    @classmethod
    def minimal(cls) -> "Blocklist":
        return cls(MINIMAL_WORDS)

    @classmethod
    def sqids_blocklist(cls) -> "Blocklist":
        """The default blocklist shipped with the sqids library."""
        return cls(DEFAULT_BLOCKLIST)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def merge(self, other: "Blocklist") -> "Blocklist":
        return Blocklist(self._words | other.words)

    def blocks(self, text: str) -> Optional[str]:
        """Return the first word found anywhere in ``text``, or None."""
        if not self._words:
            return None
        lowered = text.lower()
        for word in self._words:
            if word in lowered:
                return word
        return None

    def blocks_id(self, encoded_id: str) -> Optional[str]:
        """Return the first word that blocks ``encoded_id`` under the Sqids rules, or None."""
        lowered = encoded_id.lower()
        for word in self._words:
            if len(word) > len(lowered):
                continue
            if len(lowered) <= 3 or len(word) <= 3:
                if lowered == word:
                    return word
            elif _DIGIT.search(word):
                if lowered.startswith(word) or lowered.endswith(word):
                    return word
            elif word in lowered:
                return word
        return None

    def filter_for_alphabet(self, alphabet: Union[Alphabet, str]) -> "Blocklist":
        """Keep words of 3+ characters that can be spelled with ``alphabet`` (case-insensitive)."""
        characters = alphabet.characters if isinstance(alphabet, Alphabet) else str(alphabet)
        available = set(characters.lower())
        return Blocklist(
            word for word in self._words
            if len(word) >= 3 and set(word) <= available
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blocklist):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"<Blocklist words: {len(self._words)}>"


def should_check_blocklist(mode: str, id_length: int, threshold_length: int) -> bool:
    """Decide whether an id of ``id_length`` characters is checked against the blocklist.

    ``raise_if_likely`` always checks: configurations where checking would be
    expensive are rejected when the configuration is built.
    """
    if mode == "length_threshold":
        return id_length <= threshold_length
    return True
