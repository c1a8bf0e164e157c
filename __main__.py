"""CLI shim for running the tool directly from the repository checkout."""

from cryptostring.cli import main
from cryptostring import (
    CodecConfig,
    CryptoString,
    decode,
    encode,
    make_cryptostring,
    parse_cryptostring,
)

__all__ = [
    "CodecConfig",
    "CryptoString",
    "decode",
    "encode",
    "main",
    "make_cryptostring",
    "parse_cryptostring",
]


if __name__ == "__main__":
    main()
