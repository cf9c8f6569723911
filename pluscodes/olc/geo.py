from __future__ import annotations

import dataclasses
from decimal import Decimal, localcontext

from pluscodes.olc.alphabet import DECIMAL_CONTEXT, LATITUDE_MAX, LONGITUDE_MAX
from pluscodes.olc.errors import InvalidRangeError, OutOfRangeError


def to_decimal(value: float | int | str | Decimal) -> Decimal:
    """Convert a coordinate to Decimal through its shortest repr.

    ``Decimal(str(20.3701135))`` is ``Decimal("20.3701135")``, which is what a
    caller means; the binary expansion of the float is not.
    """

    d = value if isinstance(value, Decimal) else Decimal(str(value))
    if not d.is_finite():
        raise OutOfRangeError(f"Coordinate must be a finite number, got {value!r}")
    return d


def clip_latitude(latitude: Decimal) -> Decimal:
    return min(max(latitude, Decimal(-LATITUDE_MAX)), Decimal(LATITUDE_MAX))


def normalize_longitude(longitude: Decimal) -> Decimal:
    """Wrap longitude into [-180, 180), whatever the number of turns."""

    if -LONGITUDE_MAX <= longitude < LONGITUDE_MAX:
        return longitude

    # The remainder must be exact, so the context has to hold every digit
    # from the integer part down to the last fractional one.
    ctx = DECIMAL_CONTEXT.copy()
    ctx.prec = max(
        DECIMAL_CONTEXT.prec,
        longitude.adjusted() - min(longitude.as_tuple().exponent, 0) + 3,
    )
    with localcontext(ctx):
        # Decimal remainder keeps the sign of the dividend.
        wrapped = (longitude + LONGITUDE_MAX) % (2 * LONGITUDE_MAX)
        if wrapped < 0:
            wrapped += 2 * LONGITUDE_MAX
        return wrapped - LONGITUDE_MAX


@dataclasses.dataclass(frozen=True, slots=True)
class Point:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -LATITUDE_MAX <= self.latitude <= LATITUDE_MAX:
            raise OutOfRangeError(
                f"latitude {self.latitude!r} is out of range -90 to 90"
            )
        if not -LONGITUDE_MAX <= self.longitude <= LONGITUDE_MAX:
            raise OutOfRangeError(
                f"longitude {self.longitude!r} is out of range -180 to 180"
            )


@dataclasses.dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding box of a decoded code.

    The box is half-open: it contains its south-west corner (``min``) but not
    its north-east corner (``max``). ``code_length`` is the number of digits
    the area was decoded from, 0 for areas built by hand.
    """

    min: Point
    max: Point
    code_length: int = 0

    def __post_init__(self) -> None:
        if (
            self.min.latitude >= self.max.latitude
            or self.min.longitude >= self.max.longitude
        ):
            raise InvalidRangeError("min must be less than max")

    @classmethod
    def from_bounds(
        cls,
        south: float,
        west: float,
        north: float,
        east: float,
        *,
        code_length: int = 0,
    ) -> CodeArea:
        return cls(Point(south, west), Point(north, east), code_length)

    @property
    def south_latitude(self) -> float:
        return self.min.latitude

    @property
    def west_longitude(self) -> float:
        return self.min.longitude

    @property
    def north_latitude(self) -> float:
        return self.max.latitude

    @property
    def east_longitude(self) -> float:
        return self.max.longitude

    @property
    def center_latitude(self) -> float:
        return (self.min.latitude + self.max.latitude) / 2

    @property
    def center_longitude(self) -> float:
        return (self.min.longitude + self.max.longitude) / 2

    @property
    def center(self) -> Point:
        return Point(self.center_latitude, self.center_longitude)

    @property
    def latitude_height(self) -> float:
        # Subtract in decimal so a 6 digit area is exactly 0.05 high.
        return float(to_decimal(self.max.latitude) - to_decimal(self.min.latitude))

    @property
    def longitude_width(self) -> float:
        return float(
            to_decimal(self.max.longitude) - to_decimal(self.min.longitude)
        )

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min.latitude <= latitude < self.max.latitude
            and self.min.longitude <= longitude < self.max.longitude
        )

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Point):
            return False
        return self.contains(point.latitude, point.longitude)
