from __future__ import annotations

from decimal import Decimal, localcontext

from pluscodes.olc.alphabet import (
    CODE_ALPHABET,
    CODE_PRECISION_NORMAL,
    DECIMAL_CONTEXT,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_CODE_LENGTH,
    MIN_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    latitude_precision,
)
from pluscodes.olc.errors import InvalidLengthError
from pluscodes.olc.geo import clip_latitude, normalize_longitude, to_decimal

# Latitude 90 is moved down by this fraction of a cell so the code stays decodable.
_POLE_NUDGE = Decimal("0.9")


def encode(
    latitude: float | Decimal,
    longitude: float | Decimal,
    code_length: int = CODE_PRECISION_NORMAL,
) -> str:
    """Encode a location into a full code of ``code_length`` digits.

    Lengths above 15 are clamped. Below 10 only whole latitude/longitude pairs
    can be encoded, so odd lengths (and anything under 4) are rejected.
    Latitude is clipped to [-90, 90]; longitude wraps around.
    """

    code_length = min(code_length, MAX_CODE_LENGTH)
    if code_length < MIN_CODE_LENGTH or (
        code_length < PAIR_CODE_LENGTH and code_length % 2 == 1
    ):
        raise InvalidLengthError(f"Illegal code length {code_length}")

    with localcontext(DECIMAL_CONTEXT):
        lat = clip_latitude(to_decimal(latitude))
        lng = normalize_longitude(to_decimal(longitude))

        if lat == LATITUDE_MAX:
            lat -= _POLE_NUDGE * latitude_precision(code_length)

        remaining_lat = lat + LATITUDE_MAX
        remaining_lng = lng + LONGITUDE_MAX

        # Divided before the first digit is taken.
        lat_precision = Decimal(ENCODING_BASE * ENCODING_BASE)
        lng_precision = Decimal(ENCODING_BASE * ENCODING_BASE)

        out: list[str] = []
        generated = 0
        while generated < code_length:
            if generated < PAIR_CODE_LENGTH:
                lat_precision /= ENCODING_BASE
                lng_precision /= ENCODING_BASE
                lat_digit = int(remaining_lat // lat_precision)
                lng_digit = int(remaining_lng // lng_precision)
                remaining_lat -= lat_precision * lat_digit
                remaining_lng -= lng_precision * lng_digit
                out.append(CODE_ALPHABET[lat_digit])
                out.append(CODE_ALPHABET[lng_digit])
                generated += 2
            else:
                lat_precision /= GRID_ROWS
                lng_precision /= GRID_COLUMNS
                row = int(remaining_lat // lat_precision)
                col = int(remaining_lng // lng_precision)
                remaining_lat -= lat_precision * row
                remaining_lng -= lng_precision * col
                out.append(CODE_ALPHABET[row * GRID_COLUMNS + col])
                generated += 1

            if generated == SEPARATOR_POSITION:
                out.append(SEPARATOR)

    if generated < SEPARATOR_POSITION:
        out.append(PADDING_CHARACTER * (SEPARATOR_POSITION - generated))
        out.append(SEPARATOR)
    return "".join(out)
