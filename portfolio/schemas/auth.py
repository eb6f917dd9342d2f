"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Login request; starts the OTP flow."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class VerifyOtpRequest(BaseModel):
    """Second login step."""

    email: EmailStr = Field(..., max_length=255)
    otp: str = Field(..., pattern=r"^\d{4,10}$")


class ResendOtpRequest(BaseModel):
    email: EmailStr = Field(..., max_length=255)


class OtpSentResponse(BaseModel):
    """Acknowledgement that a code was issued and queued for delivery."""

    message: str
    email: str
    otp: str | None = None  # only when the deployment exposes codes


class UserResponse(BaseModel):
    """User information response. Never carries credentials or OTP state."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    is_verified: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse


class UserCreate(BaseModel):
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)


class UserUpdate(BaseModel):
    email: EmailStr | None = Field(None, max_length=255)
    password: str | None = Field(None, min_length=6, max_length=128)
    name: str | None = Field(None, min_length=1, max_length=255)


class MessageResponse(BaseModel):
    message: str
