import smtplib
import ssl
from contextlib import contextmanager
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr
from typing import Iterator

from app.platform.config import SmtpConfig
from app.platform.logger import get_logger

logger = get_logger("email_service")


def _connect(config: SmtpConfig) -> smtplib.SMTP:
    context = ssl.create_default_context()
    if config.security == "ssl":
        return smtplib.SMTP_SSL(config.host, config.port, context=context)

    server = smtplib.SMTP(config.host, config.port)
    try:
        server.ehlo()
        server.starttls(context=context)
        server.ehlo()
    except Exception:
        server.close()
        raise
    return server


def _release(server: smtplib.SMTP) -> None:
    try:
        server.quit()
    except smtplib.SMTPException as e:
        # quit fails once the relay has already dropped us; close the socket anyway
        logger.warning(f"SMTP quit failed, closing socket: {str(e)}")
        server.close()


@contextmanager
def smtp_connection(config: SmtpConfig) -> Iterator[smtplib.SMTP]:
    """
    Authenticated connection to the relay, released on every exit path.
    """
    server = _connect(config)
    try:
        if config.username or config.password:
            server.login(config.username, config.password)
        yield server
    finally:
        _release(server)


def build_message(from_address: str, to_email: str, subject: str, html: str) -> MIMEMultipart:
    """Plain-text and HTML parts both carry the rendered HTML."""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = from_address
    msg["To"] = to_email

    msg.attach(MIMEText(html, "plain"))
    msg.attach(MIMEText(html, "html"))
    return msg


def send_email(config: SmtpConfig, to_email: str, subject: str, html: str) -> None:
    """Base function to send one email via the configured SMTP relay"""
    msg = build_message(config.from_address, to_email, subject, html)
    envelope_from = parseaddr(config.from_address)[1] or config.from_address

    with smtp_connection(config) as server:
        server.sendmail(envelope_from, [to_email], msg.as_string())

    logger.info(f"Email sent via {config.host}:{config.port} to {to_email}")
