from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Codec(Protocol):
    """What the ReversibleId facade needs from an encoder.

    ``decode`` returns an empty list for strings that are not ids of this
    codec and raises InvalidInputError for strings that cannot be parsed.
    """

    def encode(self, numbers: Sequence[int]) -> str:
        ...

    def decode(self, encoded_id: str) -> List[int]:
        ...
