from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class OtpPurpose(str, Enum):
    SIGNUP = "signup"
    RESET_PASSWORD = "reset_password"
    CLAIM_VERIFICATION = "claim_verification"

    @classmethod
    def resolve(cls, value: str) -> "OtpPurpose":
        """Map any purpose string to a member; unknown values fall back to SIGNUP."""
        try:
            return cls(value)
        except ValueError:
            return cls.SIGNUP


class OtpRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Optional here so the relay, not request parsing, reports missing fields
    email: Optional[str] = None
    code: Optional[str] = None
    purpose: Optional[str] = None

    @field_validator("email", "code", "purpose", mode="before")
    @classmethod
    def blank_scalars_are_missing(cls, v):
        # false, 0 and "" count as absent, same as a missing key
        if isinstance(v, (bool, int, float, str)) and not v:
            return None
        return v


class OtpSendResponse(BaseModel):
    success: bool = True
    message: str = "OTP sent successfully"
