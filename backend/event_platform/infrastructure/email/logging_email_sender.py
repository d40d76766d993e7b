"""Email adapter that records outbound messages in the log instead of sending them.

Stands in for an SMTP or provider-backed sender in development and tests;
``sent`` keeps the messages for inspection.
"""

import logging

from event_platform.application.interfaces import EmailMessage, EmailSender

logger = logging.getLogger(__name__)


class LoggingEmailSender(EmailSender):
    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> bool:
        self.sent.append(message)
        logger.info("Email to %s: %s", message.to, message.subject)
        logger.debug("Email body: %s", message.body)
        return True
