import re
import secrets

OTP_PATTERN = re.compile(r"^\d{6}$")


def generate_otp(length: int = 6) -> str:
    """Generate a numeric OTP for email verification"""
    return ''.join([str(secrets.randbelow(10)) for _ in range(length)])


def is_valid_otp_format(code: str) -> bool:
    return bool(OTP_PATTERN.match(code or ""))
