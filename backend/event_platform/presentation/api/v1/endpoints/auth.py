"""Authentication endpoints: registration, login, tokens and password flows."""

from fastapi import APIRouter, Depends, Query

from event_platform.application.schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserResponse,
)
from event_platform.application.services import AuthResult, AuthService
from event_platform.domain.entities import Actor
from event_platform.infrastructure.dependencies import get_auth_service, get_current_user

from event_platform.presentation.api.v1.endpoints.users import to_user_response

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        access_token=result.token.access_token,
        expires_in=result.token.expires_in,
        user=to_user_response(result.user, result.person),
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Create a plain user account and return a signed-in session."""
    result = await service.register(data)
    return _auth_response(result)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    result = await service.login(data.email, data.password)
    return _auth_response(result)


@router.get("/me", response_model=UserResponse)
async def me(
    actor: Actor = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    user, person = await service.me(actor)
    return to_user_response(user, person)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(
    actor: Actor = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    token = await service.refresh(actor)
    return TokenResponse(access_token=token.access_token, expires_in=token.expires_in)


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    data: ChangePasswordRequest,
    actor: Actor = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await service.change_password(actor, data.current_password, data.new_password)
    return MessageResponse(message="Password changed successfully")


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    data: ForgotPasswordRequest,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Always answers with the same message, whether or not the email exists."""
    message = await service.forgot_password(data.email)
    return MessageResponse(message=message)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    data: ResetPasswordRequest,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await service.reset_password(data.token, data.new_password)
    return MessageResponse(message="Password has been reset successfully")


@router.get("/verify-email", response_model=MessageResponse)
async def verify_email(
    token: str = Query(..., min_length=1),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    await service.verify_email(token)
    return MessageResponse(message="Email verified successfully")
