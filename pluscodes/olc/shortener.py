from __future__ import annotations

from decimal import Decimal, localcontext

from pluscodes.olc.alphabet import (
    DECIMAL_CONTEXT,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    latitude_precision,
)
from pluscodes.olc.decoder import decode_digits
from pluscodes.olc.errors import NotFullCodeError, PaddedCodeError, TooFarError
from pluscodes.olc.geo import to_decimal
from pluscodes.olc.validator import trim_code, validate_code

# Shortening needs the reference within half a cell; keep a margin so recovery
# near a cell edge is unambiguous.
_SAFETY_FACTOR = Decimal("0.3")


def shorten(code: str, latitude: float, longitude: float) -> str:
    """Remove as many leading digit pairs as the reference location allows.

    Tries to drop four, three, two and finally one pair. Raises TooFarError
    when the reference is too far from the code's center to drop any.
    """

    code = validate_code(code)
    if code.find(SEPARATOR) != SEPARATOR_POSITION:
        raise NotFullCodeError(f"{code!r} is already a short code")
    if PADDING_CHARACTER in code:
        raise PaddedCodeError(f"{code!r} is padded and cannot be shortened")

    cell = decode_digits(trim_code(code))
    with localcontext(DECIMAL_CONTEXT):
        distance = max(
            abs(to_decimal(latitude) - cell.center_latitude),
            abs(to_decimal(longitude) - cell.center_longitude),
        )
        for pairs in range(4, 0, -1):
            short_code = code[pairs * 2 :]
            # "9C3W9QCJ+" minus eight digits is a lone separator, not a code.
            if len(short_code) < 2:
                continue
            if distance < latitude_precision(pairs * 2) * _SAFETY_FACTOR:
                return short_code

    raise TooFarError(
        f"Reference location ({latitude}, {longitude}) is too far from {code!r}"
    )
