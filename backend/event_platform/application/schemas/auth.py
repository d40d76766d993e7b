"""Pydantic DTOs for authentication."""

from datetime import date

from pydantic import EmailStr, Field

from .common import CamelModel
from .types import PersonName, Phone
from .user import UserResponse


class RegisterRequest(CamelModel):
    first_name: PersonName
    last_name: PersonName
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    phone: Phone | None = None
    date_of_birth: date | None = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=128)


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int


class AuthResponse(TokenResponse):
    user: UserResponse
