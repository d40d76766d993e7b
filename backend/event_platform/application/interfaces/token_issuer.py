"""Abstract access-token interface (port)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from event_platform.domain.entities import Actor, User


@dataclass
class IssuedToken:
    access_token: str
    expires_in: int  # seconds


class TokenIssuer(ABC):
    """Port for signed bearer tokens."""

    @abstractmethod
    def issue(self, user: User) -> IssuedToken:
        """Sign a token carrying the user's id, email, role and company."""
        ...

    @abstractmethod
    def decode(self, token: str) -> Actor:
        """Verify a token. Raises AuthenticationError when invalid or expired."""
        ...
