#!/usr/bin/env python3
"""
Send a test OTP email through the configured SMTP relay

Usage:
    python scripts/send_test_otp.py juan.delacruz@plv.edu.ph [--purpose reset_password] [--code 123456]

Reads SMTP_* settings from the environment or .env, exactly like the API.
"""

import argparse
import sys

from app.features.otp.schemas.otp import OtpPurpose
from app.features.otp.services.otp_relay import OtpRelay
from app.features.otp.utils.otp import generate_otp, is_valid_otp_format
from app.platform.config import get_settings
from app.platform.exceptions import RelayError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a test OTP email")
    parser.add_argument("email", help="Recipient address")
    parser.add_argument(
        "--purpose",
        default=OtpPurpose.SIGNUP.value,
        choices=[p.value for p in OtpPurpose],
        help="Which template to send",
    )
    parser.add_argument("--code", help="Code to send (a random 6-digit code by default)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    code = args.code or generate_otp()

    if not is_valid_otp_format(code):
        print(f"⚠️  '{code}' is not a 6-digit code, the web client will not accept it")

    settings = get_settings()
    relay = OtpRelay(settings.smtp_config())

    try:
        relay.send_otp({"email": args.email, "code": code, "purpose": args.purpose})
    except RelayError as e:
        print(f"❌ {e.to_content()}")
        return 1

    print(f"✅ Sent {args.purpose} code {code} to {args.email}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
