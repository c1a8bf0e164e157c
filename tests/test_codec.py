import base64
import json
import os

import pytest

import cryptostring
from cryptostring import CodecConfig


KNOWN_VECTORS = [
    (b"a", "VE"),
    (b"aa", "VPO"),
    (b"aaa", "VPRn"),
    (b"aaaa", "VPRom"),
    (b"aaaaa", "VPRomVE"),
    (b"aaaaaa", "VPRomVPO"),
    (b"aaaaaaa", "VPRomVPRn"),
    (b"aaaaaaaa", "VPRomVPRom"),
]


@pytest.mark.parametrize("raw, text", KNOWN_VECTORS)
def test_known_vectors(raw: bytes, text: str) -> None:
    assert cryptostring.encode(raw) == text
    assert cryptostring.decode(text) == raw


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 31, 32, 33, 257])
def test_round_trip_random(length: int) -> None:
    payload = os.urandom(length)
    assert cryptostring.decode(cryptostring.encode(payload)) == payload


def test_round_trip_extreme_bytes() -> None:
    for payload in (b"\x00", b"\xff", b"\x00" * 7, b"\xff" * 7, b"\xff\xff\xff"):
        assert cryptostring.decode(cryptostring.encode(payload)) == payload


def test_encode_empty() -> None:
    assert cryptostring.encode(b"") == ""


def test_encode_lengths() -> None:
    """Each full chunk gives 5 characters, a tail of n bytes gives n + 1."""
    for length in range(1, 13):
        full, extra = divmod(length, 4)
        expected = full * 5 + (extra + 1 if extra else 0)
        assert len(cryptostring.encode(b"\x42" * length)) == expected


def test_encode_edge_chunks() -> None:
    assert cryptostring.encode(b"\x00\x00\x00\x00") == "00000"
    assert cryptostring.encode(b"\xff\xff\xff\xff") == "|NsC0"


def test_encode_accepts_bytearray() -> None:
    assert cryptostring.encode(bytearray(b"aaaa")) == "VPRom"


def test_encode_rejects_str() -> None:
    with pytest.raises(TypeError):
        cryptostring.encode("aaaa")


def test_encode_only_uses_alphabet() -> None:
    text = cryptostring.encode(bytes(range(256)))
    assert cryptostring.is_base85(text)
    assert " " not in text and "\n" not in text


def test_alphabet_shape() -> None:
    assert len(cryptostring.ALPHABET) == 85
    assert len(set(cryptostring.ALPHABET)) == 85
    for char in ",.'\"\\ :/[]":
        assert char not in cryptostring.ALPHABET
    assert cryptostring.PAD_DIGIT == 84


def test_decode_empty() -> None:
    with pytest.raises(cryptostring.EmptyInputError, match="empty"):
        cryptostring.decode("")


def test_decode_only_whitespace() -> None:
    with pytest.raises(cryptostring.EmptyInputError):
        cryptostring.decode(" \n\t ")


def test_decode_skips_whitespace() -> None:
    assert cryptostring.decode("VPR om\nVP\tRn ") == b"aaaaaaa"
    assert cryptostring.decode(cryptostring.wrap_text("VPRomVPRom", 3)) == b"a" * 8


def test_decode_invalid_character() -> None:
    """Out-of-alphabet characters fail instead of decoding to garbage."""
    with pytest.raises(cryptostring.InvalidCharacterError) as excinfo:
        cryptostring.decode("VPR,m")
    assert excinfo.value.char == ","
    assert excinfo.value.position == 3


def test_decode_invalid_character_position_counts_whitespace() -> None:
    with pytest.raises(cryptostring.InvalidCharacterError) as excinfo:
        cryptostring.decode("VP Ro\"")
    assert excinfo.value.position == 5


def test_decode_single_character_tail() -> None:
    with pytest.raises(cryptostring.MalformedTailError, match="1 character"):
        cryptostring.decode("VPRomV")


def test_decode_single_character_tail_allowed() -> None:
    cfg = CodecConfig(allow_short_tail=True)
    assert cryptostring.decode("VPRomV", cfg) == b"aaaa"
    assert cryptostring.decode("V", cfg) == b""


def test_decode_overflowing_group() -> None:
    with pytest.raises(cryptostring.OverflowGroupError):
        cryptostring.decode("~~~~~")


def test_decode_overflowing_tail() -> None:
    """A hand-made tail can exceed 32 bits once padded."""
    with pytest.raises(cryptostring.OverflowGroupError) as excinfo:
        cryptostring.decode("|N")
    assert excinfo.value.position == 1


def test_decode_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        cryptostring.decode("")
    assert issubclass(cryptostring.DecodeError, cryptostring.CryptoStringError)


def test_decode_tail_pads_with_highest_digit() -> None:
    # "VE" padded with "~~~" keeps the high byte of the chunk
    assert cryptostring.decode("VE") == b"a"
    assert cryptostring.decode("00") == b"\x00"
    assert cryptostring.decode("{{") == b"\xff"


def test_wrap_text() -> None:
    assert cryptostring.wrap_text("abcdefg", 3) == "abc\ndef\ng"
    assert cryptostring.wrap_text("", 3) == ""
    with pytest.raises(ValueError, match="width"):
        cryptostring.wrap_text("abc", 0)


def test_is_base85() -> None:
    assert cryptostring.is_base85("VPRom")
    assert not cryptostring.is_base85("")
    assert not cryptostring.is_base85("VP Rom")
    assert not cryptostring.is_base85("VP:Rom")


def test_codec_config_round_trip(tmp_path) -> None:
    cfg = CodecConfig(allow_short_tail=True, wrap_width=76)
    path = tmp_path / "codec.json"
    cryptostring.save_codec_config(cfg, path)
    assert path.read_text().endswith("\n")
    loaded = cryptostring.load_codec_config(path)
    assert loaded == cfg


def test_codec_config_defaults(tmp_path) -> None:
    path = tmp_path / "codec.json"
    path.write_text("{}")
    loaded = cryptostring.load_codec_config(path)
    assert loaded == CodecConfig()
    assert loaded.allow_short_tail is False
    assert loaded.wrap_width is None


def test_codec_config_wrap_width_none_string() -> None:
    loaded = CodecConfig.from_dict({"wrap_width": "None"})
    assert loaded.wrap_width is None


def test_codec_config_rejects_bad_values() -> None:
    with pytest.raises(cryptostring.ConfigError, match="Unsupported codec config version"):
        CodecConfig.from_dict({"version": "v99"})
    with pytest.raises(cryptostring.ConfigError, match="wrap_width must be >= 1"):
        CodecConfig.from_dict({"wrap_width": 0})
    with pytest.raises(cryptostring.ConfigError, match="wrap_width must be an integer"):
        CodecConfig.from_dict({"wrap_width": "wide"})
    with pytest.raises(cryptostring.ConfigError, match="allow_short_tail"):
        CodecConfig.from_dict({"allow_short_tail": "yes"})


def test_codec_config_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "codec.json"
    path.write_text(json.dumps([1, 2, 3]))
    with pytest.raises(cryptostring.ConfigError, match="JSON object"):
        cryptostring.load_codec_config(path)
    path.write_text("{not json")
    with pytest.raises(cryptostring.ConfigError, match="not valid JSON"):
        cryptostring.load_codec_config(path)


def test_empty_payload_is_not_round_tripped() -> None:
    """Empty bytes encode to "", but "" is never valid decoder input."""
    assert cryptostring.encode(b"") == ""
    with pytest.raises(cryptostring.EmptyInputError):
        cryptostring.decode(cryptostring.encode(b""))


@pytest.mark.parametrize("length", range(0, 40))
def test_matches_base64_b85(length: int) -> None:
    payload = os.urandom(length)
    assert cryptostring.encode(payload) == base64.b85encode(payload).decode()


@pytest.mark.parametrize("text", ["VE", "{{", "00", "VPRn", "VPRomVPO"])
def test_decode_matches_base64_b85(text: str) -> None:
    assert cryptostring.decode(text) == base64.b85decode(text)


def test_decode_overflowing_tail_position_ignores_trailing_whitespace() -> None:
    with pytest.raises(cryptostring.OverflowGroupError) as excinfo:
        cryptostring.decode("|N\n")
    assert excinfo.value.position == 1


def test_decode_overflowing_group_position() -> None:
    with pytest.raises(cryptostring.OverflowGroupError) as excinfo:
        cryptostring.decode("VPRom ~~~~~ VE")
    assert excinfo.value.position == 10


def test_codec_config_rejects_bool_wrap_width() -> None:
    with pytest.raises(cryptostring.ConfigError, match="wrap_width must be an integer"):
        CodecConfig.from_dict({"wrap_width": True})
