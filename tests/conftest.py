"""
Test configuration and fixtures for the OTP mail relay.

The relay gets a fake SMTP config through FastAPI dependency overrides and
smtplib is patched, so no test ever opens a real socket.
"""

from typing import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.platform.config import SmtpConfig, get_smtp_config

FAKE_SMTP_CONFIG = SmtpConfig(
    host="smtp.test.local",
    port=465,
    username="relay@plv.edu.ph",
    password="app-password",
    from_address="PLV Lost and Found <noreply@plv.edu.ph>",
)


def override_get_smtp_config() -> SmtpConfig:
    return FAKE_SMTP_CONFIG


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """TestClient with the fake SMTP config injected."""
    test_app.dependency_overrides[get_smtp_config] = override_get_smtp_config
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.pop(get_smtp_config, None)


@pytest.fixture
def mock_smtp():
    """Patched implicit-TLS SMTP class; `.return_value` is the connection."""
    with patch("app.platform.services.email.smtplib.SMTP_SSL") as smtp_ssl:
        yield smtp_ssl


@pytest.fixture
def otp_payload():
    return {"email": "juan.delacruz@plv.edu.ph", "code": "482913", "purpose": "signup"}
