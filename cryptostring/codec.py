import base64
import dataclasses
import json
import logging
from typing import Dict, List, Optional

from .errors import (
    ConfigError,
    EmptyInputError,
    InvalidCharacterError,
    MalformedTailError,
    OverflowGroupError,
)

logger = logging.getLogger(__name__)

ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "!#$%&()*+-;<=>?@^_`{|}~"
)
BASE = 85

# base64.b85decode fills missing tail slots with the highest digit, so the
# bytes kept from a truncated group are never rounded down.
PAD_DIGIT = BASE - 1

_DECODE_TABLE: Dict[str, int] = {char: idx for idx, char in enumerate(ALPHABET)}


@dataclasses.dataclass
class CodecConfig:
    allow_short_tail: bool = False
    wrap_width: Optional[int] = None
    version: str = "v1"

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "allow_short_tail": self.allow_short_tail,
            "wrap_width": self.wrap_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CodecConfig":
        version = data.get("version", "v1")
        if version != "v1":
            raise ConfigError(f"Unsupported codec config version: {version}")
        allow_short_tail = data.get("allow_short_tail", False)
        if not isinstance(allow_short_tail, bool):
            raise ConfigError("allow_short_tail must be true or false")
        wrap_raw = data.get("wrap_width")
        if isinstance(wrap_raw, str) and wrap_raw.lower() == "none":
            wrap_width = None
        elif isinstance(wrap_raw, bool):
            raise ConfigError(f"wrap_width must be an integer, got {wrap_raw!r}")
        else:
            try:
                wrap_width = None if wrap_raw is None else int(wrap_raw)
            except (TypeError, ValueError):
                raise ConfigError(f"wrap_width must be an integer, got {wrap_raw!r}")
        if wrap_width is not None and wrap_width < 1:
            raise ConfigError("wrap_width must be >= 1")
        return cls(
            allow_short_tail=allow_short_tail,
            wrap_width=wrap_width,
            version=version,
        )


def save_codec_config(cfg: CodecConfig, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(cfg.to_dict(), f, indent=2)
        f.write("\n")


def load_codec_config(path: str) -> CodecConfig:
    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path}: not valid JSON ({exc.msg})")
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return CodecConfig.from_dict(raw)


def encode(data: bytes) -> str:
    """Encode bytes as base85 text.

    Every 4-byte big-endian chunk becomes 5 characters, most significant
    digit first. A trailing chunk of n < 4 bytes is zero-padded and only its
    first n + 1 characters are kept.
    """
    if isinstance(data, str):
        raise TypeError("encode() expects bytes, not str")
    text = base64.b85encode(data).decode("ascii")
    logger.debug("encoded %d bytes into %d characters", len(data), len(text))
    return text


def _find_overflow(digits: str, positions: List[int]) -> int:
    # Index in the original text of the last character of the first group
    # that does not fit in 32 bits.
    for start in range(0, len(digits), 5):
        try:
            base64.b85decode(digits[start : start + 5])
        except ValueError:
            return positions[min(start + 5, len(positions)) - 1]
    return positions[-1]


def decode(text: str, cfg: Optional[CodecConfig] = None) -> bytes:
    """Decode base85 text back into bytes.

    Whitespace anywhere in the text is ignored. Characters outside the
    alphabet are rejected rather than substituted.
    """
    if cfg is None:
        cfg = CodecConfig()
    if len(text) == 0:
        raise EmptyInputError()

    chars = []
    positions = []
    for position, char in enumerate(text):
        if char.isspace():
            continue
        if char not in _DECODE_TABLE:
            raise InvalidCharacterError(char, position)
        chars.append(char)
        positions.append(position)

    if not chars:
        raise EmptyInputError("cannot decode text containing only whitespace")

    digits = "".join(chars)
    tail = len(digits) % 5
    if tail == 1:
        if not cfg.allow_short_tail:
            raise MalformedTailError(tail)
        logger.debug("dropping dangling single-character tail")
        digits = digits[:-1]
        positions = positions[:-1]
        if not digits:
            return b""

    # Missing tail slots are filled with "~", the highest digit
    try:
        out = base64.b85decode(digits)
    except ValueError:
        raise OverflowGroupError(_find_overflow(digits, positions))

    logger.debug("decoded %d characters into %d bytes", len(chars), len(out))
    return out


def wrap_text(text: str, width: int) -> str:
    if width < 1:
        raise ValueError("width must be >= 1")
    return "\n".join(text[i : i + width] for i in range(0, len(text), width))


def is_base85(text: str) -> bool:
    return len(text) > 0 and all(char in _DECODE_TABLE for char in text)


__all__ = [
    "ALPHABET",
    "BASE",
    "PAD_DIGIT",
    "CodecConfig",
    "save_codec_config",
    "load_codec_config",
    "encode",
    "decode",
    "wrap_text",
    "is_base85",
]
