from __future__ import annotations

from decimal import Decimal, localcontext
from typing import NamedTuple

from pluscodes.olc.alphabet import (
    DECIMAL_CONTEXT,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_CODE_LENGTH,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
)
from pluscodes.olc.errors import NotFullCodeError
from pluscodes.olc.geo import CodeArea
from pluscodes.olc.validator import trim_code, validate_code


class Cell(NamedTuple):
    """Exact bounds of decoded digits, in degrees (south-west corner + size)."""

    south: Decimal
    west: Decimal
    lat_precision: Decimal
    lng_precision: Decimal
    code_length: int

    @property
    def center_latitude(self) -> Decimal:
        return self.south + self.lat_precision / 2

    @property
    def center_longitude(self) -> Decimal:
        return self.west + self.lng_precision / 2

    def to_area(self) -> CodeArea:
        return CodeArea.from_bounds(
            float(self.south),
            float(self.west),
            float(self.south + self.lat_precision),
            float(self.west + self.lng_precision),
            code_length=self.code_length,
        )


def decode_digits(digits: str) -> Cell:
    """Decode upper-case code digits (no separator, no padding).

    The caller is responsible for validation; digits past the fifteenth are
    ignored.
    """

    digits = digits[:MAX_CODE_LENGTH]
    with localcontext(DECIMAL_CONTEXT):
        lat_precision = Decimal(ENCODING_BASE * ENCODING_BASE)
        lng_precision = Decimal(ENCODING_BASE * ENCODING_BASE)
        south = Decimal(0)
        west = Decimal(0)

        i = 0
        while i < len(digits):
            if i < PAIR_CODE_LENGTH:
                lat_precision /= ENCODING_BASE
                lng_precision /= ENCODING_BASE
                south += lat_precision * digit_value(digits[i])
                west += lng_precision * digit_value(digits[i + 1])
                i += 2
            else:
                row, col = divmod(digit_value(digits[i]), GRID_COLUMNS)
                lat_precision /= GRID_ROWS
                lng_precision /= GRID_COLUMNS
                south += lat_precision * row
                west += lng_precision * col
                i += 1

        return Cell(
            south=south - LATITUDE_MAX,
            west=west - LONGITUDE_MAX,
            lat_precision=lat_precision,
            lng_precision=lng_precision,
            code_length=len(digits),
        )


def decode(code: str) -> CodeArea:
    """Decode a full code into the area it covers."""

    code = validate_code(code)
    if code.find(SEPARATOR) != SEPARATOR_POSITION:
        raise NotFullCodeError(f"{code!r} is a short code and cannot be decoded")
    return decode_digits(trim_code(code)).to_area()
