from __future__ import annotations


class PlusCodeError(ValueError):
    pass


class InvalidCodeError(PlusCodeError):
    """The string is not a syntactically valid Open Location Code."""


class InvalidLengthError(PlusCodeError):
    """encode() was asked for a digit count it cannot produce."""


class InvalidOperationError(PlusCodeError):
    """The code is valid but of the wrong kind for the requested operation."""


class NotFullCodeError(InvalidOperationError):
    pass


class NotShortCodeError(InvalidOperationError):
    pass


class PaddedCodeError(InvalidOperationError):
    pass


class TooFarError(PlusCodeError):
    """The reference location is too far from the code to shorten it."""


class OutOfRangeError(PlusCodeError):
    """A coordinate is outside [-90, 90] x [-180, 180] or not a finite number."""


class InvalidRangeError(PlusCodeError):
    """A code area's minimum corner is not strictly south-west of its maximum."""
