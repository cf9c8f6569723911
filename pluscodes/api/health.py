from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import JSONResponse

from pluscodes.core.settings import Settings
from pluscodes.core.settings import get_settings
from pluscodes.olc import PlusCodeError, encode


router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    # Readiness: the configured default length must be one encode() accepts,
    # otherwise every /v1/codes/encode call without a length would fail.
    try:
        encode(0.0, 0.0, settings.default_code_length)
    except PlusCodeError:
        return JSONResponse(status_code=503, content={"status": "not_ready"})

    return JSONResponse(status_code=200, content={"status": "ready"})
