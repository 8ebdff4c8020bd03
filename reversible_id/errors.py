"""
Exceptions raised by the reversible id codecs and their configuration layer.

Configuration and alphabet errors are raised while building a configuration
and are fatal for that configuration. Input, format and length errors are
expected per-call conditions that callers should catch around encode/decode.
"""


class ReversibleIdError(Exception):
    """Base class for every error raised by this package."""


# --- CONSTRUCTION-TIME ERRORS ---

class InvalidConfigurationError(ReversibleIdError, ValueError):
    """An option (salt, lengths, grouping, blocklist mode...) is invalid."""


class InvalidAlphabetError(ReversibleIdError, ValueError):
    """The alphabet is too small, contains disallowed characters, or is of the wrong type."""


class SaltError(ReversibleIdError, ValueError):
    """The salt given to the consistent shuffle cannot cover the requested cycle."""


# --- PER-CALL ERRORS ---

class InvalidInputError(ReversibleIdError, ValueError):
    """Values handed to encode/decode are negative, out of range or malformed."""


class EncodedIdFormatError(ReversibleIdError, ValueError):
    """The string given to decode is not a well formed encoded id."""


class EncodedIdLengthError(ReversibleIdError, ValueError):
    """An encoded id (produced or received) exceeds the configured max length."""


class BlocklistError(ReversibleIdError):
    """A generated id contains a blocklisted word and the codec does not retry."""

    def __init__(self, encoded_id: str, word: str):
        super().__init__(f"Generated ID '{encoded_id}' contains blocklisted word: '{word}'")
        self.encoded_id = encoded_id
        self.word = word


class MaxAttemptsError(ReversibleIdError):
    """Every retry of a blocklist-avoiding encode produced a blocked id."""
