"""
ReversibleId: the public encode/decode entry point.

Wraps a configured codec with input coercion, grouping of the output into
human-friendly chunks, length limits, equivalence mapping on decode and hex
packing.
"""
import re
from typing import Any, Iterable, List, Optional, Union

from .config import BaseConfiguration, HashidConfiguration, SqidsConfiguration
from .errors import EncodedIdFormatError, EncodedIdLengthError, InvalidConfigurationError, InvalidInputError
from .hex import HexInput, HexRepresentation

EncodableValue = Union[int, str, Iterable[Union[int, str]]]


class ReversibleId:
    def __init__(self, config: BaseConfiguration):
        if not isinstance(config, BaseConfiguration):
            raise InvalidConfigurationError("config must be a configuration instance")

        self.config = config
        self.codec = config.create_codec()
        self.hex_representation = HexRepresentation(config.hex_digit_encoding_group_size)
        self._split_pattern = re.compile(f".{{{config.split_at}}}(?=.)") if config.split_at else None

    @classmethod
    def hashid(cls, salt: str, **options: Any) -> "ReversibleId":
        return cls(HashidConfiguration(salt=salt, **options))

    @classmethod
    def sqids(cls, **options: Any) -> "ReversibleId":
        return cls(SqidsConfiguration(**options))

    # ==================================================
    # ENCODE
    # ==================================================

    def encode(self, values: EncodableValue) -> str:
        """Encode one integer or a list of integers into a single id.

        Raises InvalidInputError for negative, non-integer, missing or too
        many values and EncodedIdLengthError when the id exceeds max_length.
        """
        inputs = self._prepare_input(values)
        encoded_id = self.codec.encode(inputs)

        if self._split_pattern is not None and self.config.split_with is not None:
            encoded_id = self._split_pattern.sub(lambda m: m.group(0) + self.config.split_with, encoded_id)

        if self._max_length_exceeded(encoded_id):
            raise EncodedIdLengthError(
                f"Encoded id is {len(encoded_id)} characters, max_length is {self.config.max_length}"
            )
        return encoded_id

    def encode_hex(self, hexs: HexInput) -> str:
        return self.encode(self.hex_representation.hex_as_integers(hexs))

    # ==================================================
    # DECODE
    # ==================================================

    def decode(self, encoded_id: str, downcase: Optional[bool] = None) -> List[int]:
        """Decode an id; an empty list means it is not an id of this configuration.

        ``downcase`` lowercases the input first and defaults to the
        configuration's ``downcase_on_decode``.
        """
        if not isinstance(encoded_id, str):
            raise EncodedIdFormatError("Encoded id must be a string")
        if self._max_length_exceeded(encoded_id):
            raise EncodedIdLengthError("Max length of input exceeded")

        try:
            return self.codec.decode(self._normalize(encoded_id, downcase))
        except InvalidInputError as exc:
            raise EncodedIdFormatError(str(exc)) from exc

    def decode_hex(self, encoded_id: str, downcase: Optional[bool] = None) -> List[str]:
        return self.hex_representation.integers_as_hex(self.decode(encoded_id, downcase=downcase))

    # ==================================================
    # HELPERS
    # ==================================================

    def _prepare_input(self, values: EncodableValue) -> List[int]:
        raw = list(values) if isinstance(values, (list, tuple)) else [values]
        try:
            inputs = [int(value) for value in raw]
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Values to encode must be integers: {exc}") from exc

        if not inputs:
            raise InvalidInputError("At least one integer id must be provided")
        if any(n < 0 for n in inputs):
            raise InvalidInputError("Integer IDs to be encoded can only be positive")
        if len(inputs) > self.config.max_inputs_per_id:
            raise InvalidInputError(
                f"{len(inputs)} integer IDs provided, maximum amount of IDs is {self.config.max_inputs_per_id}"
            )
        return inputs

    def _normalize(self, encoded_id: str, downcase: Optional[bool]) -> str:
        if self.config.split_with:
            encoded_id = encoded_id.replace(self.config.split_with, "")
        if downcase is None:
            downcase = self.config.downcase_on_decode
        if downcase:
            encoded_id = encoded_id.lower()
        return self.config.alphabet.map_equivalents(encoded_id)

    def _max_length_exceeded(self, text: str) -> bool:
        return self.config.max_length is not None and len(text) > self.config.max_length

    def __repr__(self) -> str:
        return f"<ReversibleId codec: {self.config.codec_type}>"
