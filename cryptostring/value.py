"""Algorithm-tagged base85 strings of the form ``LABEL:DATA``.

A label is 1-24 characters from ``[A-Z0-9-]``, such as ``ED25519`` or
``CURVE25519``. The data segment is the base85 encoding of the raw bytes.

Construction never raises on malformed input. ``parse_cryptostring`` and
``make_cryptostring`` return either a :class:`CryptoString` or an
:class:`InvalidCryptoString`; callers check ``is_valid()`` before reading
the parts, and reading the parts of an invalid value raises
:class:`~cryptostring.errors.MalformedValueError`.
"""

import dataclasses
import logging
import re
from typing import Union

from .codec import ALPHABET, decode, encode
from .errors import MalformedValueError

logger = logging.getLogger(__name__)

LABEL_MAX_LENGTH = 24
SEPARATOR = ":"

_LABEL_CLASS = r"[A-Z0-9-]{1,%d}" % LABEL_MAX_LENGTH
_DATA_CLASS = "[" + "".join(re.escape(char) for char in ALPHABET) + "]+"

PREFIX_PATTERN = re.compile(r"^%s$" % _LABEL_CLASS)
CRYPTOSTRING_PATTERN = re.compile(r"^(%s):(%s)$" % (_LABEL_CLASS, _DATA_CLASS))


@dataclasses.dataclass(frozen=True)
class CryptoString:
    text: str
    split_point: int

    def __post_init__(self):
        if (
            CRYPTOSTRING_PATTERN.fullmatch(self.text) is None
            or self.text.find(SEPARATOR) != self.split_point
        ):
            raise MalformedValueError(
                f"{self.text!r} is not a valid CryptoString; "
                "use parse_cryptostring() for untrusted text"
            )

    def is_valid(self) -> bool:
        return True

    @property
    def prefix(self) -> str:
        return self.text[: self.split_point]

    @property
    def data(self) -> str:
        # Skip the separator itself
        return self.text[self.split_point + 1 :]

    def raw_bytes(self) -> bytes:
        return decode(self.data)

    def as_string(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclasses.dataclass(frozen=True)
class InvalidCryptoString:
    text: str
    reason: str

    def is_valid(self) -> bool:
        return False

    def _fail(self):
        raise MalformedValueError(f"invalid CryptoString {self.text!r}: {self.reason}")

    @property
    def prefix(self) -> str:
        self._fail()

    @property
    def data(self) -> str:
        self._fail()

    def raw_bytes(self) -> bytes:
        self._fail()

    def as_string(self) -> str:
        self._fail()

    def __str__(self) -> str:
        return f"<invalid CryptoString: {self.reason}>"


ParsedCryptoString = Union[CryptoString, InvalidCryptoString]


def _invalid(text: str, reason: str) -> InvalidCryptoString:
    logger.debug("rejected CryptoString %r: %s", text, reason)
    return InvalidCryptoString(text=text, reason=reason)


def parse_cryptostring(text: str) -> ParsedCryptoString:
    if not isinstance(text, str):
        return _invalid(repr(text), "expected a string")
    if CRYPTOSTRING_PATTERN.fullmatch(text) is None:
        if len(text) == 0:
            return _invalid(text, "empty string")
        return _invalid(text, "does not match LABEL:DATA")
    return CryptoString(text=text, split_point=text.index(SEPARATOR))


def make_cryptostring(label: str, raw: bytes) -> ParsedCryptoString:
    if len(label) == 0:
        return _invalid(label + SEPARATOR, "empty label")
    if len(raw) == 0:
        return _invalid(label + SEPARATOR, "empty data")
    if PREFIX_PATTERN.fullmatch(label) is None:
        return _invalid(label + SEPARATOR, f"bad label {label!r}")
    return CryptoString(text=label + SEPARATOR + encode(raw), split_point=len(label))


def require_cryptostring(text: str) -> CryptoString:
    parsed = parse_cryptostring(text)
    if not parsed.is_valid():
        raise MalformedValueError(f"invalid CryptoString {text!r}: {parsed.reason}")
    return parsed


__all__ = [
    "LABEL_MAX_LENGTH",
    "SEPARATOR",
    "PREFIX_PATTERN",
    "CRYPTOSTRING_PATTERN",
    "CryptoString",
    "InvalidCryptoString",
    "ParsedCryptoString",
    "parse_cryptostring",
    "make_cryptostring",
    "require_cryptostring",
]
