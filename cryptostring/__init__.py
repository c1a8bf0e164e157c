"""Base85 codec and algorithm-tagged CryptoString values."""

from .codec import (
    ALPHABET,
    PAD_DIGIT,
    CodecConfig,
    decode,
    encode,
    is_base85,
    load_codec_config,
    save_codec_config,
    wrap_text,
)
from .errors import (
    ConfigError,
    CryptoStringError,
    DecodeError,
    EmptyInputError,
    InvalidCharacterError,
    MalformedTailError,
    MalformedValueError,
    OverflowGroupError,
)
from .value import (
    CRYPTOSTRING_PATTERN,
    PREFIX_PATTERN,
    CryptoString,
    InvalidCryptoString,
    make_cryptostring,
    parse_cryptostring,
    require_cryptostring,
)

__all__ = [
    "ALPHABET",
    "PAD_DIGIT",
    "CodecConfig",
    "decode",
    "encode",
    "is_base85",
    "load_codec_config",
    "save_codec_config",
    "wrap_text",
    "ConfigError",
    "CryptoStringError",
    "DecodeError",
    "EmptyInputError",
    "InvalidCharacterError",
    "MalformedTailError",
    "MalformedValueError",
    "OverflowGroupError",
    "CRYPTOSTRING_PATTERN",
    "PREFIX_PATTERN",
    "CryptoString",
    "InvalidCryptoString",
    "make_cryptostring",
    "parse_cryptostring",
    "require_cryptostring",
]

__version__ = "0.1.0"
