import os
from dataclasses import dataclass
from typing import Tuple

from jinja2 import Environment, FileSystemLoader

from app.features.otp.schemas.otp import OtpPurpose

current_dir = os.path.dirname(os.path.abspath(__file__))
template_dir = os.path.join(current_dir, "../template")

if not os.path.exists(template_dir):
    template_dir = os.path.join(os.getcwd(), "app/features/otp/template")

# Codes are caller-trusted and substituted verbatim
env = Environment(loader=FileSystemLoader(template_dir), autoescape=False)

OTP_EXPIRATION_MINUTES = "10"


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    template_name: str


TEMPLATES = {
    OtpPurpose.SIGNUP: EmailTemplate(
        subject="Verify Your PLV Lost and Found Account",
        template_name="verify_signup.html",
    ),
    OtpPurpose.RESET_PASSWORD: EmailTemplate(
        subject="Reset Your PLV Lost and Found Password",
        template_name="reset_password.html",
    ),
    OtpPurpose.CLAIM_VERIFICATION: EmailTemplate(
        subject="Verify Your Item Claim",
        template_name="claim_verification.html",
    ),
}


def select_template(purpose: str) -> EmailTemplate:
    return TEMPLATES[OtpPurpose.resolve(purpose)]


def render_template(template: EmailTemplate, code: str) -> Tuple[str, str]:
    html = env.get_template(template.template_name).render(
        otp_code=code, expiration_minutes=OTP_EXPIRATION_MINUTES
    )
    return template.subject, html
