from .alphabet import Alphabet
from .blocklist import Blocklist, should_check_blocklist
from .codec import Codec
from .config import BaseConfiguration, HashidConfiguration, SqidsConfiguration
from .errors import (
    BlocklistError,
    EncodedIdFormatError,
    EncodedIdLengthError,
    InvalidAlphabetError,
    InvalidConfigurationError,
    InvalidInputError,
    MaxAttemptsError,
    ReversibleIdError,
    SaltError,
)
from .facade import ReversibleId
from .hashid_codec import HashidCodec
from .hex import HexRepresentation
from .sqids_codec import SqidsCodec

__version__ = "1.0.0"

__all__ = [
    "Alphabet",
    "BaseConfiguration",
    "Blocklist",
    "BlocklistError",
    "Codec",
    "EncodedIdFormatError",
    "EncodedIdLengthError",
    "HashidCodec",
    "HashidConfiguration",
    "HexRepresentation",
    "InvalidAlphabetError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "MaxAttemptsError",
    "ReversibleId",
    "ReversibleIdError",
    "SaltError",
    "SqidsCodec",
    "SqidsConfiguration",
    "should_check_blocklist",
]
