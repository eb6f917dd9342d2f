"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from portfolio.api.dependencies import ACCESS_TOKEN_COOKIE, get_auth_service
from portfolio.config import get_settings
from portfolio.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    OtpSentResponse,
    ResendOtpRequest,
    UserResponse,
    VerifyOtpRequest,
)
from portfolio.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=OtpSentResponse)
def login(
    credentials: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Check email and password, then email a one-time code."""
    return auth_service.login(credentials.email, credentials.password)


@router.post("/verify-otp", response_model=AuthResponse)
def verify_otp(
    data: VerifyOtpRequest,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Exchange a valid one-time code for an access token.

    The token is returned in the body and also set as an HTTP-only cookie.
    """
    access_token, user = auth_service.verify_otp(data.email, data.otp)

    settings = get_settings()
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=settings.jwt_expiration_minutes * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return AuthResponse(access_token=access_token, user=UserResponse.model_validate(user))


@router.post("/resend-otp", response_model=OtpSentResponse)
def resend_otp(
    data: ResendOtpRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Issue a fresh code, replacing any earlier one."""
    return auth_service.resend_otp(data.email)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Clear the session cookie (bearer clients should discard their token)."""
    response.delete_cookie(ACCESS_TOKEN_COOKIE, httponly=True, samesite="lax")
    return {"message": "Logged out successfully"}
