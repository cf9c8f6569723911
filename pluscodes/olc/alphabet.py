"""Open Location Code alphabet, format constants and precision helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal
from types import MappingProxyType
from typing import Mapping

from pluscodes.olc.errors import InvalidCodeError

# A separator used to break the code into two parts to aid memorability.
SEPARATOR = "+"

# The number of characters to place before the separator.
SEPARATOR_POSITION = 8

# The character used to pad codes.
PADDING_CHARACTER = "0"

# The character set used to encode the digit values.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"

ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# Maximum code length using just lat/lng pair encoding.
PAIR_CODE_LENGTH = 10

# Digits beyond this are accepted by the validator but ignored when decoding.
MAX_CODE_LENGTH = 15

# Shortest code encode() will produce (one latitude/longitude pair above padding).
MIN_CODE_LENGTH = 4

# Grid refinement used for digits after PAIR_CODE_LENGTH.
GRID_COLUMNS = 4
GRID_ROWS = 5

# First digit values of a full code that keep latitude <= 90 and longitude <= 180.
FIRST_LATITUDE_DIGIT_VALUE_MAX = 8
FIRST_LONGITUDE_DIGIT_VALUE_MAX = 17

# Approximately 14x14 meters.
CODE_PRECISION_NORMAL = 10

# Approximately 2x3 meters.
CODE_PRECISION_EXTRA = 11

# Built once at import, read-only afterwards.
DIGIT_VALUES: Mapping[str, int] = MappingProxyType(
    {c: i for i, c in enumerate(CODE_ALPHABET)}
)

# Every intermediate value of a 15 digit code fits well inside 40 significant
# digits, so encode/decode are exact for any finite decimal input.
DECIMAL_CONTEXT = Context(prec=40, rounding=ROUND_HALF_EVEN)


def digit_value(char: str) -> int:
    """Return the numeric value of a single upper-case code digit."""

    try:
        return DIGIT_VALUES[char]
    except KeyError as e:
        raise InvalidCodeError(f"Invalid code digit: {char!r}") from e


def latitude_precision(code_length: int) -> Decimal:
    """Height in degrees of the area covered by a code of ``code_length`` digits.

    Up to PAIR_CODE_LENGTH the cells are square; after that the grid has more
    rows than columns so latitude and longitude precision diverge.
    """

    base = Decimal(ENCODING_BASE)
    if code_length <= PAIR_CODE_LENGTH:
        return base ** (2 - code_length // 2)
    return base**-3 / Decimal(GRID_ROWS) ** (code_length - PAIR_CODE_LENGTH)
