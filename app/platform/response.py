from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

CORS_ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def api_response(
    *,
    data: Optional[Any] = None,
    message: str = "Operation successful",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Standard envelope for platform endpoints (health and friends).
    Automatically sets status = "success" if < 400 else "error"
    """
    status_str = "success" if status_code < 400 else "error"
    data = jsonable_encoder(data) if data is not None else {}

    return JSONResponse(
        status_code=status_code,
        content={
            "status_code": status_code,
            "status": status_str,
            "message": message,
            "data": data,
        },
    )


def relay_response(content: dict, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Bare JSON body for the OTP relay, always open to any origin."""
    return JSONResponse(status_code=status_code, content=content, headers=CORS_ALLOW_ORIGIN)


def preflight_response() -> PlainTextResponse:
    return PlainTextResponse("ok", status_code=status.HTTP_200_OK, headers=PREFLIGHT_HEADERS)
