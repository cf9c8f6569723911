"""Open Location Code (Plus Code) codec.

Importing this package exposes the public operations and value types.
"""

from __future__ import annotations

from pluscodes.olc.alphabet import (
    CODE_ALPHABET,
    CODE_PRECISION_EXTRA,
    CODE_PRECISION_NORMAL,
    MAX_CODE_LENGTH,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.olc.code import PlusCode
from pluscodes.olc.decoder import decode
from pluscodes.olc.encoder import encode
from pluscodes.olc.errors import (
    InvalidCodeError,
    InvalidLengthError,
    InvalidOperationError,
    InvalidRangeError,
    NotFullCodeError,
    NotShortCodeError,
    OutOfRangeError,
    PaddedCodeError,
    PlusCodeError,
    TooFarError,
)
from pluscodes.olc.geo import CodeArea, Point
from pluscodes.olc.recoverer import recover_nearest
from pluscodes.olc.shortener import shorten
from pluscodes.olc.validator import is_full, is_padded, is_short, is_valid

__all__ = [
    "CODE_ALPHABET",
    "CODE_PRECISION_EXTRA",
    "CODE_PRECISION_NORMAL",
    "MAX_CODE_LENGTH",
    "PADDING_CHARACTER",
    "SEPARATOR",
    "SEPARATOR_POSITION",
    "CodeArea",
    "InvalidCodeError",
    "InvalidLengthError",
    "InvalidOperationError",
    "InvalidRangeError",
    "NotFullCodeError",
    "NotShortCodeError",
    "OutOfRangeError",
    "PaddedCodeError",
    "PlusCode",
    "PlusCodeError",
    "Point",
    "TooFarError",
    "decode",
    "encode",
    "is_full",
    "is_padded",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
]
