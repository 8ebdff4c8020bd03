"""
Validated, immutable configuration for the reversible id facade.

Configurations are pydantic models. Library errors raised by validators are
surfaced unchanged; any other validation failure becomes an
InvalidConfigurationError so pydantic's ValidationError never leaks out.
"""
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .alphabet import Alphabet
from .blocklist import Blocklist, BlocklistMode
from .codec import Codec
from .errors import InvalidAlphabetError, InvalidConfigurationError, ReversibleIdError
from .hashid_codec import HashidCodec
from .hex import HexRepresentation
from .sqids_codec import MAX_MIN_LENGTH, SqidsCodec

# ============================================================================
# LIMITS
# ============================================================================

MIN_HASHID_ALPHABET_SIZE = 16
MIN_SALT_LENGTH = 4
# Above this many inputs, raise_if_likely assumes ids get long enough to collide with the blocklist.
LIKELY_BLOCKED_MAX_INPUTS = 100


class BaseConfiguration(BaseModel):
    """Options shared by every codec."""

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)

    codec_type: ClassVar[str] = "custom"

    min_length: int = 8
    alphabet: Alphabet = Field(default_factory=Alphabet.modified_crockford)
    split_at: Optional[int] = 4
    split_with: Optional[str] = "-"
    hex_digit_encoding_group_size: int = 4
    max_length: Optional[int] = 128
    max_inputs_per_id: int = 32
    blocklist: Blocklist = Field(default_factory=Blocklist.empty)
    blocklist_mode: BlocklistMode = "length_threshold"
    blocklist_max_length: int = 32
    downcase_on_decode: bool = False

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            for error in exc.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, ReversibleIdError):
                    raise cause from None
            raise InvalidConfigurationError(f"Invalid {type(self).__name__}: {exc}") from exc

    # --- Field validation ---

    @field_validator("alphabet", mode="before")
    def coerce_alphabet(cls, value):
        if isinstance(value, Alphabet):
            return value
        if isinstance(value, (str, list)):
            return Alphabet(value)
        raise InvalidAlphabetError("alphabet must be an Alphabet, a string or a list of characters")

    @field_validator("blocklist", mode="before")
    def coerce_blocklist(cls, value):
        if isinstance(value, Blocklist):
            return value
        if value is None:
            return Blocklist.empty()
        if isinstance(value, (list, tuple, set, frozenset)):
            return Blocklist(value)
        raise InvalidConfigurationError("blocklist must be a Blocklist, or a list or set of strings")

    @field_validator("min_length", "max_inputs_per_id", "blocklist_max_length")
    def validate_positive(cls, value, info):
        if value <= 0:
            raise InvalidConfigurationError(f"{info.field_name} must be an integer greater than 0")
        return value

    @field_validator("max_length", "split_at")
    def validate_positive_or_none(cls, value, info):
        if value is not None and value <= 0:
            raise InvalidConfigurationError(f"{info.field_name} must be an integer greater than 0 or None")
        return value

    @field_validator("hex_digit_encoding_group_size")
    def validate_hex_group_size(cls, value):
        HexRepresentation(value)
        return value

    @field_validator("split_with")
    def validate_split_with(cls, value):
        if value is not None and not value:
            raise InvalidConfigurationError("split_with must be a non-empty string or None")
        return value

    # --- Cross-field validation ---

    @model_validator(mode="after")
    def validate_split_with_outside_alphabet(self):
        if self.split_with is not None and any(c in self.alphabet for c in self.split_with):
            raise InvalidConfigurationError("split_with must be a string not part of the alphabet, or None")
        return self

    @model_validator(mode="after")
    def validate_blocklist_mode(self):
        if self.blocklist_mode != "raise_if_likely" or not self.blocklist:
            return self

        if self.min_length > self.blocklist_max_length:
            raise InvalidConfigurationError(
                f"min_length ({self.min_length}) exceeds blocklist_max_length ({self.blocklist_max_length}), "
                "every id would be checked against the blocklist. "
                "Use blocklist_mode 'length_threshold' or 'always' instead."
            )
        if self.max_inputs_per_id > LIKELY_BLOCKED_MAX_INPUTS:
            raise InvalidConfigurationError(
                f"max_inputs_per_id ({self.max_inputs_per_id}) is very high, long ids are likely "
                "to contain blocklisted words. Lower it or use another blocklist_mode."
            )
        return self

    def create_codec(self) -> Codec:
        raise NotImplementedError("Subclasses must implement create_codec")


class HashidConfiguration(BaseConfiguration):
    """Configuration for the salted Hashids-style codec."""

    codec_type: ClassVar[str] = "hashids"

    salt: str
    downcase_on_decode: bool = True

    @field_validator("salt")
    def validate_salt(cls, value):
        if len(value) < MIN_SALT_LENGTH:
            raise InvalidConfigurationError("salt must be a string longer than 3 characters")
        return value

    @model_validator(mode="after")
    def validate_alphabet_size(self):
        if self.alphabet.size < MIN_HASHID_ALPHABET_SIZE:
            raise InvalidAlphabetError(
                f"Alphabet must contain at least {MIN_HASHID_ALPHABET_SIZE} unique characters."
            )
        return self

    def create_codec(self) -> HashidCodec:
        return HashidCodec(
            self.salt,
            self.min_length,
            self.alphabet,
            self.blocklist,
            self.blocklist_mode,
            self.blocklist_max_length,
        )


class SqidsConfiguration(BaseConfiguration):
    """Configuration for the salt-free Sqids-style codec."""

    codec_type: ClassVar[str] = "sqids"

    @model_validator(mode="after")
    def validate_sqids_limits(self):
        if not self.alphabet.characters.isascii():
            raise InvalidAlphabetError("Alphabet cannot contain multibyte characters")
        if self.min_length > MAX_MIN_LENGTH:
            raise InvalidConfigurationError(f"min_length must be between 1 and {MAX_MIN_LENGTH}")
        return self

    def create_codec(self) -> SqidsCodec:
        return SqidsCodec(
            self.alphabet,
            self.min_length,
            self.blocklist,
            self.blocklist_mode,
            self.blocklist_max_length,
        )
