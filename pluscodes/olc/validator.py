"""Syntactic checks on Open Location Code strings.

A code is either full (separator after eight characters) or short (separator
earlier, at an even index). Full codes may be padded with ``0`` after 2, 4 or
6 digits, in which case nothing follows the separator.
"""

from __future__ import annotations

from pluscodes.olc.alphabet import (
    DIGIT_VALUES,
    FIRST_LATITUDE_DIGIT_VALUE_MAX,
    FIRST_LONGITUDE_DIGIT_VALUE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscodes.olc.errors import InvalidCodeError

_PADDING_STARTS = (2, 4, 6)


def _is_valid_upper(code: str) -> bool:
    if len(code) < 2:
        return False

    # Exactly one separator, at an even index of at most eight.
    sep = code.find(SEPARATOR)
    if sep == -1 or sep != code.rfind(SEPARATOR):
        return False
    if sep % 2 != 0 or sep > SEPARATOR_POSITION:
        return False

    if sep == SEPARATOR_POSITION:
        if DIGIT_VALUES.get(code[0], 0) > FIRST_LATITUDE_DIGIT_VALUE_MAX:
            return False
        if DIGIT_VALUES.get(code[1], 0) > FIRST_LONGITUDE_DIGIT_VALUE_MAX:
            return False

    padding_started = False
    for i, char in enumerate(code[:sep]):
        if padding_started:
            if char != PADDING_CHARACTER:
                return False
            continue
        if char in DIGIT_VALUES:
            continue
        if char == PADDING_CHARACTER and i in _PADDING_STARTS:
            padding_started = True
            continue
        return False

    suffix = code[sep + 1 :]
    if padding_started:
        # Padded codes are full and stop at the separator.
        return sep == SEPARATOR_POSITION and not suffix
    if len(suffix) == 1:
        return False
    return all(char in DIGIT_VALUES for char in suffix)


def _separator_index(code: str) -> int:
    return code.find(SEPARATOR)


def is_valid(code: str | None) -> bool:
    if not code:
        return False
    return _is_valid_upper(code.upper())


def is_short(code: str | None) -> bool:
    return is_valid(code) and 0 <= _separator_index(code) < SEPARATOR_POSITION


def is_full(code: str | None) -> bool:
    return is_valid(code) and _separator_index(code) == SEPARATOR_POSITION


def is_padded(code: str | None) -> bool:
    """True for valid codes carrying ``0`` padding (always full codes)."""

    return is_valid(code) and PADDING_CHARACTER in code


def validate_code(code: str | None) -> str:
    """Return the canonical upper-case form of ``code`` or raise InvalidCodeError."""

    if not code:
        raise InvalidCodeError("code must be a non-empty string")
    upper = code.upper()
    if not _is_valid_upper(upper):
        raise InvalidCodeError(f"{code!r} is not a valid Open Location Code")
    return upper


def trim_code(code: str) -> str:
    """Strip the separator and padding, leaving only the code digits.

    "8FWC2300+" -> "8FWC23", "8FWC2345+G6" -> "8FWC2345G6"
    """

    return code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "")


def pad_code_digits(digits: str) -> str:
    """Inverse of trim_code for full codes: add padding and the separator."""

    if SEPARATOR in digits:
        return digits
    if len(digits) < SEPARATOR_POSITION:
        padding = PADDING_CHARACTER * (SEPARATOR_POSITION - len(digits))
        return digits + padding + SEPARATOR
    return digits[:SEPARATOR_POSITION] + SEPARATOR + digits[SEPARATOR_POSITION:]
