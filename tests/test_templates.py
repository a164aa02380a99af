import pytest

from app.features.otp.schemas.otp import OtpPurpose
from app.features.otp.services.templates import TEMPLATES, render_template, select_template


@pytest.mark.parametrize(
    "purpose, subject, heading",
    [
        ("signup", "Verify Your PLV Lost and Found Account", "Email Verification"),
        ("reset_password", "Reset Your PLV Lost and Found Password", "Password Reset Request"),
        ("claim_verification", "Verify Your Item Claim", "Claim Verification"),
    ],
)
def test_known_purpose_renders_its_template(purpose, subject, heading):
    rendered_subject, html = render_template(select_template(purpose), "731904")

    assert rendered_subject == subject
    assert heading in html
    assert html.count("731904") == 1
    assert '<div class="otp-code">731904</div>' in html
    assert "This code will expire in 10 minutes." in html


@pytest.mark.parametrize("purpose", ["bogus", "SIGNUP", "reset-password", " signup"])
def test_unknown_purpose_falls_back_to_signup(purpose):
    assert select_template(purpose) is TEMPLATES[OtpPurpose.SIGNUP]


def test_every_purpose_has_a_template():
    assert set(TEMPLATES) == set(OtpPurpose)


def test_code_is_substituted_verbatim():
    _, html = render_template(select_template("signup"), "<b>A1&B2</b>")

    assert '<div class="otp-code"><b>A1&B2</b></div>' in html


def test_reset_password_carries_security_notice():
    _, html = render_template(select_template("reset_password"), "000111")

    assert "Security Notice:" in html
    assert ".warning" in html


def test_shared_layout_in_every_template():
    for template in TEMPLATES.values():
        _, html = render_template(template, "123456")
        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "PLV Lost and Found System" in html
        assert "Pamantasan ng Lungsod ng Valenzuela" in html


def test_resolve_purpose():
    assert OtpPurpose.resolve("claim_verification") is OtpPurpose.CLAIM_VERIFICATION
    assert OtpPurpose.resolve("nope") is OtpPurpose.SIGNUP
