"""
Packs hexadecimal strings (UUIDs, digests...) into integer lists and back.

Each hex string is cut into groups of ``group_size`` digits starting from the
least significant end; groups are emitted least significant first. Several
strings are joined by a separator value one larger than the biggest group.
"""
import re
from typing import List, Sequence, Union

from .errors import InvalidConfigurationError, InvalidInputError

HexInput = Union[str, Sequence[str]]

_NON_HEX = re.compile(r"[^0-9a-f]", re.IGNORECASE)


class HexRepresentation:
    MAX_GROUP_SIZE = 32

    def __init__(self, group_size: int):
        if (not isinstance(group_size, int) or isinstance(group_size, bool)
                or not 1 <= group_size <= self.MAX_GROUP_SIZE):
            raise InvalidConfigurationError(
                f"hex_digit_encoding_group_size must be > 0 and <= {self.MAX_GROUP_SIZE}"
            )
        self.group_size = group_size
        # Larger than any group, so it can mark where one hex string ends.
        self.separator = 2 ** (group_size * 4)

    def hex_as_integers(self, hexs: HexInput) -> List[int]:
        inputs = [hexs] if isinstance(hexs, str) else list(hexs)
        integers: List[int] = []
        for hex_string in inputs:
            if not isinstance(hex_string, str):
                raise InvalidInputError("Hex values must be strings")
            integers.extend(self._integer_groups(_NON_HEX.sub("", hex_string)))
            integers.append(self.separator)

        if integers:
            integers.pop()
        return integers

    def integers_as_hex(self, integers: Sequence[int]) -> List[str]:
        hex_strings: List[str] = []
        groups: List[str] = []
        for integer in reversed(integers):
            if integer == self.separator:
                hex_strings.append("".join(groups))
                groups = []
            elif groups:
                # Every group but the most significant keeps its leading zeros.
                groups.append(f"{integer:0{self.group_size}x}")
            else:
                groups.append(format(integer, "x"))

        if groups:
            hex_strings.append("".join(groups))
        hex_strings.reverse()
        return hex_strings

    def _integer_groups(self, cleaned: str) -> List[int]:
        size = self.group_size
        groups = []
        end = len(cleaned)
        while end > 0:
            start = max(0, end - size)
            groups.append(int(cleaned[start:end], 16))
            end = start
        return groups
