"""Authentication use cases: register, login, tokens, password and email flows."""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from event_platform.application.interfaces import (
    EmailMessage,
    EmailSender,
    IssuedToken,
    TokenIssuer,
)
from event_platform.application.schemas import RegisterRequest, UserCreate
from event_platform.domain.entities import Actor, Person, User, UserRole
from event_platform.domain.exceptions import AuthenticationError, InvalidInputError

from .user_service import UserService

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = "If the email exists, a password reset link has been sent"


@dataclass
class AuthResult:
    token: IssuedToken
    user: User
    person: Person | None


class AuthService:
    """Credential checks on top of UserService; email notifications are best-effort."""

    def __init__(
        self,
        user_service: UserService,
        token_issuer: TokenIssuer,
        email_sender: EmailSender,
        reset_token_ttl: timedelta = timedelta(hours=1),
    ):
        self._users = user_service
        self._tokens = token_issuer
        self._email = email_sender
        self._reset_token_ttl = reset_token_ttl

    async def register(self, data: RegisterRequest) -> AuthResult:
        """Create a plain ``user`` account and sign it in."""
        user, person = await self._users.create_user(
            UserCreate(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                password=data.password,
                phone=data.phone,
                date_of_birth=data.date_of_birth,
                role=UserRole.USER,
            )
        )
        token = secrets.token_urlsafe(32)
        user = await self._users.set_verification_token(user.id, token)
        await self._notify(
            EmailMessage(
                to=user.email,
                subject="Welcome! Please verify your email",
                body=f"Hello {person.first_name}, use this token to verify your email: {token}",
                context={"token": token, "first_name": person.first_name},
            )
        )
        logger.info("Registered user %s", user.id)
        return AuthResult(token=self._tokens.issue(user), user=user, person=person)

    async def login(self, email: str, password: str) -> AuthResult:
        user = await self._users.find_by_email(email)
        if user is None or not self._users.verify_password(user, password):
            raise AuthenticationError("Invalid credentials")
        if not user.is_active:
            raise AuthenticationError("Account is not active")

        user = await self._users.record_login(user.id)
        _, person = await self._users.get_profile(user.id)
        logger.info("User %s logged in", user.id)
        return AuthResult(token=self._tokens.issue(user), user=user, person=person)

    async def me(self, actor: Actor) -> tuple[User, Person | None]:
        return await self._users.get_profile(actor.user_id)

    async def refresh(self, actor: Actor) -> IssuedToken:
        user = await self._users.get_user(actor.user_id)
        if not user.is_active:
            raise AuthenticationError("Account is not active")
        return self._tokens.issue(user)

    async def change_password(
        self, actor: Actor, current_password: str, new_password: str
    ) -> None:
        user = await self._users.get_user(actor.user_id)
        if not self._users.verify_password(user, current_password):
            raise InvalidInputError("Current password is incorrect", field="currentPassword")
        await self._users.update_password(user.id, new_password)

    async def forgot_password(self, email: str) -> str:
        """Store a reset token when the account exists; the reply never tells."""
        user = await self._users.find_by_email(email)
        if user is not None and user.is_active:
            token = secrets.token_urlsafe(32)
            expires = datetime.now(timezone.utc) + self._reset_token_ttl
            await self._users.set_reset_token(user.id, token, expires)
            await self._notify(
                EmailMessage(
                    to=user.email,
                    subject="Password reset",
                    body=f"Use this token to reset your password: {token}",
                    context={"token": token},
                )
            )
        return FORGOT_PASSWORD_MESSAGE

    async def reset_password(self, token: str, new_password: str) -> None:
        user = await self._users.find_by_reset_token(token)
        if user is None:
            raise InvalidInputError("Invalid or expired reset token", field="token")
        await self._users.update_password(user.id, new_password)

    async def verify_email(self, token: str) -> User:
        return await self._users.verify_email(token)

    async def _notify(self, message: EmailMessage) -> None:
        try:
            sent = await self._email.send(message)
        except Exception as exc:
            logger.warning("Could not send '%s' email to %s: %s", message.subject, message.to, exc)
            return
        if not sent:
            logger.warning("Email '%s' to %s was not accepted", message.subject, message.to)
