from __future__ import annotations

from decimal import Decimal, localcontext

from pluscodes.olc.alphabet import (
    DECIMAL_CONTEXT,
    ENCODING_BASE,
    LATITUDE_MAX,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.olc.decoder import decode_digits
from pluscodes.olc.encoder import encode
from pluscodes.olc.errors import NotShortCodeError
from pluscodes.olc.geo import clip_latitude, normalize_longitude, to_decimal
from pluscodes.olc.validator import trim_code, validate_code


def recover_nearest(short_code: str, latitude: float, longitude: float) -> str:
    """Recover the full code nearest to the reference location.

    The missing prefix is taken from the reference location itself; if the
    resulting cell is more than half a prefix cell away, it is moved one
    prefix cell toward the reference. Latitude is only moved if it stays
    inside (-90, 90).
    """

    short_code = validate_code(short_code)
    separator = short_code.find(SEPARATOR)
    if separator >= SEPARATOR_POSITION:
        raise NotShortCodeError(f"{short_code!r} is not a short code")

    with localcontext(DECIMAL_CONTEXT):
        ref_lat = clip_latitude(to_decimal(latitude))
        ref_lng = normalize_longitude(to_decimal(longitude))

        digits_to_recover = SEPARATOR_POSITION - separator
        # Height and width of the missing prefix, in degrees.
        prefix_precision = Decimal(ENCODING_BASE) ** (2 - digits_to_recover // 2)
        half = prefix_precision / 2

        prefix = encode(ref_lat, ref_lng)[:digits_to_recover]
        digits = trim_code(prefix + short_code)
        cell = decode_digits(digits)

        lat = cell.center_latitude
        lng = cell.center_longitude

        lat_diff = lat - ref_lat
        if lat_diff > half and lat - prefix_precision > -LATITUDE_MAX:
            lat -= prefix_precision
        elif lat_diff < -half and lat + prefix_precision < LATITUDE_MAX:
            lat += prefix_precision

        lng_diff = lng - ref_lng
        if lng_diff > half:
            lng -= prefix_precision
        elif lng_diff < -half:
            lng += prefix_precision

    return encode(lat, lng, len(digits))
