from fastapi import Request, status

from app.platform.logger import get_logger
from app.platform.response import relay_response

logger = get_logger("exceptions")

DELIVERY_FAILED_MESSAGE = "Failed to send OTP email"


class RelayError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict:
        return {"error": self.message}


class ValidationError(RelayError):
    """The caller's request is malformed or violates the address policy."""

    status_code = status.HTTP_400_BAD_REQUEST


class DeliveryError(RelayError):
    """Anything raised while composing or handing the message to the relay."""

    def to_content(self) -> dict:
        return {"error": DELIVERY_FAILED_MESSAGE, "details": self.message}


def add_exception_handlers(app):
    @app.exception_handler(RelayError)
    async def relay_exception_handler(request: Request, exc: RelayError):
        if isinstance(exc, ValidationError):
            logger.info(f"Rejected {request.url.path}: {exc.message}")
        else:
            logger.error(f"Error sending OTP email ({request.url.path}): {exc.message}", exc_info=exc)
        return relay_response(exc.to_content(), status_code=exc.status_code)
