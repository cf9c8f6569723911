from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, ValidationError

from pluscodes.core.errors import APIError, api_error_from_codec
from pluscodes.core.settings import Settings, get_settings
from pluscodes.olc import (
    PlusCode,
    PlusCodeError,
    TooFarError,
    is_full,
    is_padded,
    is_short,
    is_valid,
)


router = APIRouter(prefix="/v1/codes", tags=["codes"])


logger = logging.getLogger(__name__)


class ValidateResponse(BaseModel):
    code: str
    is_valid: bool
    is_short: bool
    is_full: bool
    is_padded: bool


class EncodeResponse(BaseModel):
    code: str
    # Code without separator and padding.
    digits: str


class DecodeResponse(BaseModel):
    code: str
    code_length: int
    south: float
    west: float
    north: float
    east: float
    center_latitude: float
    center_longitude: float


class ShortenResponse(BaseModel):
    code: str
    short_code: str


class RecoverResponse(BaseModel):
    short_code: str
    code: str


class EncodeBatchItemIn(BaseModel):
    # Out-of-range coordinates are clipped/wrapped by the encoder, not rejected.
    latitude: float
    longitude: float
    length: int | None = None


class EncodeBatchRequest(BaseModel):
    # Keep items untyped so one bad item doesn't 422 the whole batch.
    items: list[Any] = Field(default_factory=list)


class EncodeBatchItemOut(BaseModel):
    index: int
    code: str


class EncodeBatchRejectedItem(BaseModel):
    index: int
    reason_code: str
    message: str


class EncodeBatchResponse(BaseModel):
    items: list[EncodeBatchItemOut]
    rejected: list[EncodeBatchRejectedItem]


@router.get("/validate", response_model=ValidateResponse)
async def validate_code(
    *,
    code: str = Query(..., description="Open Location Code, full or short"),
) -> ValidateResponse:
    return ValidateResponse(
        code=code,
        is_valid=is_valid(code),
        is_short=is_short(code),
        is_full=is_full(code),
        is_padded=is_padded(code),
    )


@router.get("/encode", response_model=EncodeResponse)
async def encode_location(
    *,
    latitude: float = Query(..., description="WGS84 latitude, clipped to [-90, 90]"),
    longitude: float = Query(..., description="WGS84 longitude, wrapped"),
    length: int | None = Query(default=None, description="Number of code digits"),
    settings: Settings = Depends(get_settings),
) -> EncodeResponse:
    code_length = settings.default_code_length if length is None else length
    plus_code = PlusCode.encode(latitude, longitude, code_length)
    return EncodeResponse(code=plus_code.code, digits=plus_code.digits)


@router.get("/decode", response_model=DecodeResponse)
async def decode_code(
    *,
    code: str = Query(..., description="Full Open Location Code"),
) -> DecodeResponse:
    plus_code = PlusCode(code)
    area = plus_code.decode()
    return DecodeResponse(
        code=plus_code.code,
        code_length=area.code_length,
        south=area.south_latitude,
        west=area.west_longitude,
        north=area.north_latitude,
        east=area.east_longitude,
        center_latitude=area.center_latitude,
        center_longitude=area.center_longitude,
    )


@router.get("/shorten", response_model=ShortenResponse)
async def shorten_code(
    *,
    code: str = Query(..., description="Full, unpadded Open Location Code"),
    latitude: float = Query(..., description="Reference latitude"),
    longitude: float = Query(..., description="Reference longitude"),
) -> ShortenResponse:
    plus_code = PlusCode(code)
    try:
        short = plus_code.shorten(latitude, longitude)
    except TooFarError:
        logger.info(
            "Refusing to shorten %s: reference (%s, %s) too far",
            plus_code.code,
            latitude,
            longitude,
        )
        raise
    return ShortenResponse(code=plus_code.code, short_code=short.code)


@router.get("/recover", response_model=RecoverResponse)
async def recover_code(
    *,
    code: str = Query(..., description="Short Open Location Code"),
    latitude: float = Query(..., description="Reference latitude"),
    longitude: float = Query(..., description="Reference longitude"),
) -> RecoverResponse:
    short = PlusCode(code)
    recovered = short.recover_nearest(latitude, longitude)
    return RecoverResponse(short_code=short.code, code=recovered.code)


@router.post("/encode/batch", response_model=EncodeBatchResponse)
async def encode_batch(
    payload: EncodeBatchRequest,
    settings: Settings = Depends(get_settings),
) -> EncodeBatchResponse:
    if len(payload.items) > settings.max_batch_items:
        raise APIError(
            code="CODES_BATCH_TOO_LARGE",
            message=f"At most {settings.max_batch_items} items per batch",
            status_code=413,
            details={"max_batch_items": settings.max_batch_items},
        )

    items: list[EncodeBatchItemOut] = []
    rejected: list[EncodeBatchRejectedItem] = []
    for index, raw in enumerate(payload.items):
        try:
            item = EncodeBatchItemIn.model_validate(raw)
        except ValidationError as exc:
            msg = "; ".join(err.get("msg", "invalid") for err in exc.errors())
            rejected.append(
                EncodeBatchRejectedItem(
                    index=index,
                    reason_code="CODES_BATCH_ITEM_INVALID",
                    message=msg,
                )
            )
            continue

        code_length = (
            settings.default_code_length if item.length is None else item.length
        )
        try:
            plus_code = PlusCode.encode(item.latitude, item.longitude, code_length)
        except PlusCodeError as exc:
            api_error = api_error_from_codec(exc)
            logger.debug("Rejected batch item %d: %s", index, api_error.message)
            rejected.append(
                EncodeBatchRejectedItem(
                    index=index,
                    reason_code=api_error.code,
                    message=api_error.message,
                )
            )
            continue
        items.append(EncodeBatchItemOut(index=index, code=plus_code.code))

    return EncodeBatchResponse(items=items, rejected=rejected)
