import pytest

from reversible_id import (
    Alphabet,
    EncodedIdFormatError,
    EncodedIdLengthError,
    HashidConfiguration,
    InvalidConfigurationError,
    InvalidInputError,
    ReversibleId,
)

SALT = "lha83hk73y9r3jp9js98ugo84"
UUID = "9a566b8b-8618-42ab-8db7-a5a0276401fd"


# ===================================
# 1. Encoding
# ===================================

def test_encode_single_integer(coder):
    assert coder.encode(123) == "p5w9-z27j"
    assert coder.encode(0) == "qg7m-ewr2"


def test_encode_accepts_list_and_numeric_strings(coder):
    assert coder.encode([123]) == "p5w9-z27j"
    assert coder.encode("123") == "p5w9-z27j"
    assert coder.encode((78, 45)) == "7aq6-0zqw"


@pytest.mark.parametrize("options, expected", [
    ({"min_length": 4}, "w9z2"),
    ({"min_length": 16}, "8kdx-p5w9-z27j-4aqv"),
    ({"alphabet": "0123456789abcdef"}, "923b-a293"),
    ({"split_at": None}, "p5w9z27j"),
    ({"split_with": None}, "p5w9z27j"),
    ({"split_with": "++"}, "p5w9++z27j"),
    ({"split_with": "++", "split_at": 5}, "p5w9z++27j"),
    ({"split_with": "++", "split_at": 8}, "p5w9z27j"),
])
def test_encode_with_options(options, expected):
    coder = ReversibleId.hashid(salt=SALT, **options)
    assert coder.encode(123) == expected
    assert coder.decode(expected) == [123]


def test_encode_multiple_integers(coder):
    assert coder.encode([78, 45]) == "7aq6-0zqw"
    assert coder.encode([78, 45, 32]) == "9n80-qbf8-a"


@pytest.mark.parametrize("options, expected", [
    ({"min_length": 16}, "z36m-7aq6-0zqw-vj2k"),
    ({"min_length": 16, "split_at": 8}, "z36m7aq6-0zqwvj2k"),
    ({"min_length": 16, "alphabet": "0123456789abcdef"}, "d48e-636e-8069-32ab"),
])
def test_encode_multiple_integers_with_options(options, expected):
    coder = ReversibleId.hashid(salt=SALT, **options)
    assert coder.encode([78, 45]) == expected
    assert coder.decode(expected) == [78, 45]


def test_encode_within_max_length():
    coder = ReversibleId.hashid(salt=SALT, max_length=16)
    assert coder.encode([78, 45, 57]) == "nmd0-xdf4-8"


@pytest.mark.parametrize("values", [-1, [-1], [1, -1], [], "abc", None, [1.5j]])
def test_encode_invalid_input(coder, values):
    with pytest.raises(InvalidInputError):
        coder.encode(values)


def test_encode_too_many_inputs():
    coder = ReversibleId.hashid(salt=SALT, max_inputs_per_id=2)
    assert coder.encode([1, 2])
    with pytest.raises(InvalidInputError):
        coder.encode([1, 2, 3])


def test_encode_exceeding_max_length_raises():
    coder = ReversibleId.hashid(salt=SALT, max_length=8)
    with pytest.raises(EncodedIdLengthError):
        coder.encode(list(range(1, 10)))


# ===================================
# 2. Decoding
# ===================================

def test_decode_round_trip(coder):
    assert coder.decode("p5w9-z27j") == [123]
    assert coder.decode("p5w9z27j") == [123]
    assert coder.decode("7aq6-0zqw") == [78, 45]


def test_decode_maps_equivalent_characters(coder):
    """'o' reads as '0', 'i' as 'j' and 'l' as '1'."""
    assert coder.decode("p5w9-z27i") == [123]
    assert coder.decode("7aq6-ozqw") == [78, 45]


def test_decode_invalid_ids(coder):
    assert coder.decode("ozgf-w$65") == []
    assert coder.decode("") == []


def test_decode_malformed_id_raises_format_error(coder):
    with pytest.raises(EncodedIdFormatError):
        coder.decode("ogf-w$5^5")


def test_decode_rejects_non_string(coder):
    with pytest.raises(EncodedIdFormatError):
        coder.decode(123)


def test_decode_over_max_length_raises_before_decoding():
    coder = ReversibleId.hashid(salt=SALT, max_length=8)
    with pytest.raises(EncodedIdLengthError):
        coder.decode("p5w9-z27j")


def test_decode_with_custom_equivalences_and_separator():
    coder = ReversibleId.hashid(
        salt=SALT,
        alphabet=Alphabet("!@#$%^&*()+-={}~", {"_": "-"}),
        split_with="F",
    )
    assert coder.encode(8563432) == "+={+F~-~}"
    assert coder.decode("+={+F~_~}") == [8563432]


def test_decode_downcase_option():
    alphabet = "0123456789Aabcde"
    coder = ReversibleId.hashid(salt=SALT, alphabet=alphabet)
    assert coder.decode("e5bd-ea58") == [123]
    assert coder.decode("e5bd-eA58", downcase=True) == [123]
    assert coder.decode("e5bd-eA58", downcase=False) == []
    assert coder.decode("e5bd-eA58") == [123]

    exact = ReversibleId.hashid(salt=SALT, alphabet=alphabet, downcase_on_decode=False)
    assert exact.decode("e5bd-eA58") == []
    assert exact.decode("e5bd-eA58", downcase=True) == [123]


def test_decode_upper_case_id_by_default(coder):
    """Hashids ids decode case-insensitively unless lowercasing is turned off."""
    assert coder.decode("P5W9-Z27J") == [123]
    assert coder.decode("P5W9-Z27J", downcase=False) == []


def test_sqids_decode_is_case_sensitive_by_default():
    coder = ReversibleId.sqids(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", split_at=None)
    encoded = coder.encode(123456)
    assert coder.decode(encoded) == [123456]
    assert coder.decode(encoded.swapcase()) != [123456]


# ===================================
# 3. Hex encoding
# ===================================

def test_encode_hex(coder):
    assert coder.encode_hex("f1") == "zryg-pey4"
    assert coder.decode_hex("zryg-pey4") == ["f1"]


def test_encode_multiple_hex(coder):
    encoded = coder.encode_hex(["f1", "c2", "1a"])
    assert encoded == "x2vh-kjrg-t4qt-nzm3-fn2"
    assert coder.decode_hex(encoded) == ["f1", "c2", "1a"]


def test_encode_long_hex(coder):
    hexs = ["1", "c0", "97349ffe152d0013", "f0000"]
    encoded = coder.encode_hex(hexs)
    assert encoded == "bbhb-495h-bzud-269u-pc3k-nfnm-3gsj-9xa0-zg24-trtz"
    assert coder.decode_hex(encoded) == hexs


def test_encode_hex_larger_group_size():
    coder = ReversibleId.hashid(salt=SALT, hex_digit_encoding_group_size=8)
    hexs = ["1", "c0", "97349ffe152d0013", "f0000"]
    encoded = coder.encode_hex(hexs)
    assert encoded == "54ha-289r-a95t-4j0j-4pa2-ja9c-v3m8-z2g1-qxjp-ak8n-08j6-ga8g-kujj-ae6"
    assert coder.decode_hex(encoded) == hexs


def test_encode_hex_uuid(coder):
    encoded = coder.encode_hex(UUID)
    assert coder.decode_hex(encoded) == [UUID.replace("-", "")]


def test_encode_hex_within_max_length():
    coder = ReversibleId.hashid(salt=SALT, max_length=32)
    assert coder.encode_hex(["1", "c0"]) == "d4h2-xerh-rk"


def test_encode_hex_too_many_groups():
    coder = ReversibleId.hashid(salt=SALT, max_inputs_per_id=7)
    with pytest.raises(InvalidInputError):
        coder.encode_hex(UUID)


def test_decode_hex_respects_max_length():
    coder = ReversibleId.hashid(salt=SALT, max_length=8)
    with pytest.raises(EncodedIdLengthError):
        coder.decode_hex("zryg-pey4")


# ===================================
# 4. Sqids and custom codecs
# ===================================

def test_sqids_round_trip():
    coder = ReversibleId.sqids()
    for values in (0, 123, [78, 45], [1, 2, 3, 4, 5]):
        encoded = coder.encode(values)
        assert len(encoded.replace("-", "")) >= 8
        assert coder.decode(encoded) == (values if isinstance(values, list) else [values])


def test_sqids_decode_maps_equivalences():
    coder = ReversibleId.sqids()
    encoded = coder.encode(10)
    assert coder.decode(encoded.replace("0", "o").replace("1", "l")) == [10]


def test_sqids_hex_round_trip():
    coder = ReversibleId.sqids()
    assert coder.decode_hex(coder.encode_hex(UUID)) == [UUID.replace("-", "")]


def test_sqids_blocklist_regenerates_ids():
    plain = ReversibleId.sqids(min_length=4, split_at=None)
    encoded = plain.encode(42)

    blocking = ReversibleId.sqids(min_length=4, split_at=None, blocklist=[encoded], blocklist_mode="always")
    regenerated = blocking.encode(42)
    assert regenerated != encoded
    assert blocking.decode(regenerated) == [42]


class UpperHexCodec:
    def encode(self, numbers):
        return "Z".join(format(n, "X") for n in numbers)

    def decode(self, encoded_id):
        try:
            return [int(part, 16) for part in encoded_id.split("Z")]
        except ValueError:
            raise InvalidInputError("not hex") from None


class UpperHexConfiguration(HashidConfiguration):
    def create_codec(self):
        return UpperHexCodec()


def test_custom_codec_gets_grouping_and_limits():
    coder = ReversibleId(UpperHexConfiguration(salt=SALT, split_at=2, max_length=12, downcase_on_decode=False))
    assert coder.encode([255, 4096]) == "FF-Z1-00-0"
    assert coder.decode("FF-Z1-00-0") == [255, 4096]
    with pytest.raises(EncodedIdFormatError):
        coder.decode("QQ")


def test_facade_requires_configuration():
    with pytest.raises(InvalidConfigurationError):
        ReversibleId({"salt": SALT})


def test_sqids_decode_rejects_unreached_offset():
    coder = ReversibleId.sqids(split_at=None)
    assert coder.decode(coder.config.create_codec()._encode([1, 2, 3], 1)) == []
