"""Bearer token adapter: HS256 JWTs signed with PyJWT."""

import logging
import time
from typing import Any

import jwt

from event_platform.application.interfaces import IssuedToken, TokenIssuer
from event_platform.domain.entities import Actor, User, UserRole
from event_platform.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class JwtTokenIssuer(TokenIssuer):
    """Claims: ``sub`` (user id), ``email``, ``role``, ``companyId``, ``iat``, ``exp``."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = expire_minutes * 60

    def issue(self, user: User) -> IssuedToken:
        now = int(time.time())
        payload: dict[str, Any] = {
            "sub": user.id,
            "email": user.email,
            "role": user.role.value,
            "companyId": user.company_id,
            "iat": now,
            "exp": now + self._ttl_seconds,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(access_token=token, expires_in=self._ttl_seconds)

    def decode(self, token: str) -> Actor:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            raise AuthenticationError("Invalid token")

        try:
            role = UserRole(payload.get("role"))
        except ValueError:
            raise AuthenticationError("Invalid token")

        return Actor(
            user_id=payload["sub"],
            email=payload.get("email", ""),
            role=role,
            company_id=payload.get("companyId"),
        )
