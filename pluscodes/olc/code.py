from __future__ import annotations

import dataclasses

from pluscodes.olc.alphabet import (
    CODE_PRECISION_NORMAL,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.olc.decoder import decode_digits
from pluscodes.olc.encoder import encode
from pluscodes.olc.errors import NotFullCodeError
from pluscodes.olc.geo import CodeArea
from pluscodes.olc.recoverer import recover_nearest
from pluscodes.olc.shortener import shorten
from pluscodes.olc.validator import pad_code_digits, trim_code, validate_code


@dataclasses.dataclass(frozen=True, slots=True)
class PlusCode:
    """A validated, upper-case Open Location Code (full or short).

    ``digits`` is the code without separator and padding; for full codes
    ``PlusCode.from_digits(code.digits) == code``.
    """

    code: str
    digits: str = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        code = validate_code(self.code)
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "digits", trim_code(code))

    @classmethod
    def encode(
        cls,
        latitude: float,
        longitude: float,
        code_length: int = CODE_PRECISION_NORMAL,
    ) -> PlusCode:
        return cls(encode(latitude, longitude, code_length))

    @classmethod
    def from_digits(cls, digits: str) -> PlusCode:
        """Build a full code from its digits, e.g. "8FWC23" -> "8FWC2300+"."""

        plus_code = cls(pad_code_digits(digits))
        if not plus_code.is_full:
            raise NotFullCodeError(f"{digits!r} does not form a full code")
        return plus_code

    @property
    def is_full(self) -> bool:
        return self.code.find(SEPARATOR) == SEPARATOR_POSITION

    @property
    def is_short(self) -> bool:
        return self.code.find(SEPARATOR) < SEPARATOR_POSITION

    @property
    def is_padded(self) -> bool:
        return PADDING_CHARACTER in self.code

    def decode(self) -> CodeArea:
        if not self.is_full:
            raise NotFullCodeError(
                f"{self.code!r} is a short code and cannot be decoded"
            )
        return decode_digits(self.digits).to_area()

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.decode().contains(latitude, longitude)

    def shorten(self, latitude: float, longitude: float) -> PlusCode:
        return PlusCode(shorten(self.code, latitude, longitude))

    def recover_nearest(self, latitude: float, longitude: float) -> PlusCode:
        return PlusCode(recover_nearest(self.code, latitude, longitude))

    def __str__(self) -> str:
        return self.code
