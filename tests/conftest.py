import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from reversible_id import Alphabet, ReversibleId  # noqa: E402

SALT = "lha83hk73y9r3jp9js98ugo84"


@pytest.fixture
def salt():
    return SALT


@pytest.fixture
def coder():
    """A Hashids-style ReversibleId with the default options."""
    return ReversibleId.hashid(salt=SALT)


@pytest.fixture
def hex_alphabet():
    return Alphabet("0123456789abcdef")
