"""Password hashing adapter using bcrypt directly."""

import logging

import bcrypt

from event_platform.application.interfaces import PasswordHasher

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes (``$2b$`` prefix)."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or not hashed.startswith(("$2a$", "$2b$", "$2y$")):
            logger.warning("Rejected password check against a non-bcrypt hash")
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
