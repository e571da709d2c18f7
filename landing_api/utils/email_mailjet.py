"""Transactional email delivery for the contact form.

Any object with an ``async send(message)`` method that raises
``DeliveryError`` on failure can stand in for the provider; the handler never
talks to Mailjet directly.
"""

import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from landing_api.config import settings
from landing_api.exceptions import DeliveryError
from landing_api.schemas.email import EmailMessage

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    async def send(self, message: EmailMessage) -> None:
        ...


def _address(email: str, name: Optional[str]) -> Dict[str, str]:
    address = {"Email": email}
    if name:
        address["Name"] = name
    return address


def build_mailjet_payload(message: EmailMessage) -> Dict[str, Any]:
    """Translate an EmailMessage into a Mailjet v3.1 Send API body."""
    return {
        "Messages": [
            {
                "From": _address(message.from_email, message.from_name),
                "To": [_address(message.to_email, message.to_name)],
                "Subject": message.subject,
                "TextPart": message.text_part,
                "HTMLPart": message.html_part,
            }
        ]
    }


class MailjetEmailSender:
    """Send email through the Mailjet v3.1 Send API using httpx."""

    def __init__(
        self,
        api_key: Optional[str],
        api_secret: Optional[str],
        api_url: str = "https://api.mailjet.com/v3.1/send",
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: EmailMessage) -> None:
        if not (self.api_key and self.api_secret):
            logger.warning("MAILJET_API_KEY/MAILJET_SECRET_KEY not configured; cannot send email to %s", message.to_email)
            raise DeliveryError("Mailjet credentials not configured")

        payload = build_mailjet_payload(message)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.api_url,
                    json=payload,
                    auth=(self.api_key, self.api_secret),
                )
                resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPError as exc:
            raise DeliveryError(f"Mailjet request failed: {exc}") from exc
        except ValueError as exc:
            raise DeliveryError("Mailjet returned a non-JSON response") from exc

        results = (body.get("Messages") or []) if isinstance(body, dict) else []
        statuses = [result.get("Status") for result in results if isinstance(result, dict)]
        if not statuses or any(status != "success" for status in statuses):
            raise DeliveryError(f"Mailjet rejected the message: {statuses or body}")

        logger.info("Mailjet email accepted → %s subject=%r", message.to_email, message.subject)


class ConsoleEmailSender:
    """Log messages instead of sending them; for local development."""

    async def send(self, message: EmailMessage) -> None:
        logger.info(
            "Email (console) %s <%s> → %s <%s>\nSubject: %s\n\n%s",
            message.from_name or "",
            message.from_email,
            message.to_name or "",
            message.to_email,
            message.subject,
            message.text_part,
        )


def get_email_sender() -> EmailSender:
    """Build the sender selected by EMAIL_PROVIDER."""
    if settings.EMAIL_PROVIDER == "console":
        return ConsoleEmailSender()
    if settings.EMAIL_PROVIDER != "mailjet":
        logger.warning("Unknown EMAIL_PROVIDER %r; falling back to mailjet", settings.EMAIL_PROVIDER)
    return MailjetEmailSender(
        api_key=settings.MAILJET_API_KEY,
        api_secret=settings.MAILJET_SECRET_KEY,
        api_url=settings.MAILJET_API_URL,
        timeout=settings.MAILJET_TIMEOUT,
    )
