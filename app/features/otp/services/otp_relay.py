from typing import Any

from pydantic import ValidationError as SchemaValidationError

from app.features.otp.schemas.otp import OtpPurpose, OtpRequest, OtpSendResponse
from app.features.otp.services.templates import render_template, select_template
from app.platform.config import SmtpConfig
from app.platform.exceptions import DeliveryError, ValidationError
from app.platform.logger import get_logger
from app.platform.services.email import send_email

logger = get_logger("otp_relay")

MISSING_FIELDS_MESSAGE = "Missing required fields: email, code, purpose"
DOMAIN_NOT_ALLOWED_MESSAGE = "Only PLV email addresses are allowed"
PLV_EMAIL_SUFFIX = "@plv.edu.ph"


class OtpRelay:
    """
    Validates an OTP request, renders the template for its purpose and hands
    the message to the SMTP relay. Holds nothing but the injected config.
    """

    def __init__(self, config: SmtpConfig, allowed_suffix: str = PLV_EMAIL_SUFFIX):
        self.config = config
        self.allowed_suffix = allowed_suffix

    def validate(self, payload: Any) -> OtpRequest:
        try:
            request = OtpRequest.model_validate(payload)
        except SchemaValidationError as e:
            raise DeliveryError(str(e)) from e

        if not request.email or not request.code or not request.purpose:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        if not request.email.endswith(self.allowed_suffix):
            raise ValidationError(DOMAIN_NOT_ALLOWED_MESSAGE)

        return request

    def send_otp(self, payload: Any) -> OtpSendResponse:
        request = self.validate(payload)

        if OtpPurpose.resolve(request.purpose).value != request.purpose:
            logger.warning(f"Unknown OTP purpose '{request.purpose}', using signup template")

        try:
            subject, html = render_template(select_template(request.purpose), request.code)
            send_email(self.config, request.email, subject, html)
        except Exception as e:
            raise DeliveryError(str(e)) from e

        logger.info(f"OTP ({request.purpose}) sent to {request.email}")
        return OtpSendResponse()
