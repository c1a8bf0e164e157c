class CryptoStringError(ValueError):
    """Base class for every error raised by this package."""


class ConfigError(CryptoStringError):
    pass


class DecodeError(CryptoStringError):
    """Raised when text cannot be turned back into bytes."""


class EmptyInputError(DecodeError):
    def __init__(self, message: str = "cannot decode empty text"):
        super().__init__(message)


class InvalidCharacterError(DecodeError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid base85 character {char!r} at index {position}")


class MalformedTailError(DecodeError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"trailing group of {length} character(s) cannot hold any bytes"
        )


class OverflowGroupError(DecodeError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"group ending at index {position} does not fit in 32 bits"
        )


class MalformedValueError(CryptoStringError):
    """Raised when an invalid CryptoString is used as if it were valid."""


__all__ = [
    "CryptoStringError",
    "ConfigError",
    "DecodeError",
    "EmptyInputError",
    "InvalidCharacterError",
    "MalformedTailError",
    "OverflowGroupError",
    "MalformedValueError",
]
