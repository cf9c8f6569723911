from __future__ import annotations

import dataclasses
from typing import Any

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


@dataclasses.dataclass(slots=True)
class APIError(Exception):
    """Business error that must map to the standard error envelope."""

    code: str
    message: str
    status_code: int = 400
    details: Any | None = None


# Looked up along the MRO of the raised error, so subclasses win.
_CODEC_ERRORS: dict[type[PlusCodeError], tuple[str, int]] = {
    NotFullCodeError: ("PLUS_CODE_NOT_FULL", 400),
    NotShortCodeError: ("PLUS_CODE_NOT_SHORT", 400),
    PaddedCodeError: ("PLUS_CODE_PADDED", 400),
    InvalidOperationError: ("PLUS_CODE_INVALID_OPERATION", 400),
    InvalidCodeError: ("PLUS_CODE_INVALID", 400),
    InvalidLengthError: ("PLUS_CODE_LENGTH_INVALID", 400),
    TooFarError: ("PLUS_CODE_REFERENCE_TOO_FAR", 422),
    OutOfRangeError: ("COORDINATE_OUT_OF_RANGE", 400),
    InvalidRangeError: ("CODE_AREA_INVALID", 400),
    PlusCodeError: ("PLUS_CODE_ERROR", 400),
}


def api_error_from_codec(exc: PlusCodeError) -> APIError:
    for cls in type(exc).__mro__:
        if cls in _CODEC_ERRORS:
            code, status_code = _CODEC_ERRORS[cls]
            return APIError(code=code, message=str(exc), status_code=status_code)
    return APIError(code="PLUS_CODE_ERROR", message=str(exc))


def make_error_payload(
    *, code: str, message: str, trace_id: str | None, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }
