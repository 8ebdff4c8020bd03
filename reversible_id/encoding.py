"""
Process-wide helpers that turn single database IDs into short, non-sequential
and reversible strings, configured from the environment.
"""
from functools import lru_cache
from typing import Optional

from .errors import ReversibleIdError
from .facade import ReversibleId
from .log import setup_logging
from .settings import get_settings


@lru_cache()
def get_reversible_id() -> ReversibleId:
    """
    Returns a cached, singleton ReversibleId.
    It is built only once, from the settings in effect on first use.
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    return ReversibleId(settings.to_configuration())


def encode_id(n: int) -> str:
    """Encodes a single integer ID into a short, non-sequential string."""
    return get_reversible_id().encode(n)


def decode_id(s: str) -> Optional[int]:
    """Decodes a string back into an integer ID, or None if it is not a valid single ID."""
    try:
        decoded = get_reversible_id().decode(s)
    except ReversibleIdError:
        return None
    if len(decoded) == 1:
        return decoded[0]
    return None
