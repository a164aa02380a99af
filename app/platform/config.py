from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings


class SmtpConfig(BaseModel):
    """Connection details for the upstream mail relay, fixed for the process lifetime."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    username: str = ""
    password: str = ""
    from_address: str
    security: Literal["ssl", "starttls"] = "ssl"


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "PLV OTP Mail Relay"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ── SMTP Relay ──────────────────────────────
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "PLV Lost and Found <noreply@plv.edu.ph>"
    SMTP_SECURITY: Literal["ssl", "starttls"] = "ssl"

    class Config:
        env_file = str(Path(__file__).parent.parent.parent / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    def smtp_config(self) -> SmtpConfig:
        return SmtpConfig(
            host=self.SMTP_HOST,
            port=self.SMTP_PORT,
            username=self.SMTP_USER,
            password=self.SMTP_PASSWORD,
            from_address=self.SMTP_FROM,
            security=self.SMTP_SECURITY,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_smtp_config() -> SmtpConfig:
    return get_settings().smtp_config()
