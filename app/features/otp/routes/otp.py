from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from app.features.otp.services.otp_relay import OtpRelay
from app.platform.config import SmtpConfig, get_smtp_config
from app.platform.exceptions import DeliveryError
from app.platform.response import preflight_response, relay_response

router = APIRouter(tags=["OTP"])


def get_otp_relay(config: SmtpConfig = Depends(get_smtp_config)) -> OtpRelay:
    return OtpRelay(config)


@router.options("/send-otp")
async def send_otp_preflight():
    return preflight_response()


@router.post("/send-otp")
async def send_otp(request: Request, relay: OtpRelay = Depends(get_otp_relay)):
    try:
        payload = await request.json()
    except ValueError as e:
        raise DeliveryError(str(e)) from e

    # smtplib blocks, keep it off the event loop
    result = await run_in_threadpool(relay.send_otp, payload)
    return relay_response(result.model_dump())
