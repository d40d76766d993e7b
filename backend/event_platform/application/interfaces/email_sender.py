"""Abstract email sender interface (port)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class EmailMessage:
    to: str
    subject: str
    body: str
    context: dict[str, str] = field(default_factory=dict)


class EmailSender(ABC):
    """Port for outbound notification email.

    Callers treat sending as best-effort: a failure is logged and never rolls
    back the operation that triggered it.
    """

    @abstractmethod
    async def send(self, message: EmailMessage) -> bool:
        """Send a message. Returns True when accepted for delivery."""
        ...
