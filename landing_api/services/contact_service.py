import html
import logging
from typing import List, Optional

from pydantic import ValidationError as SchemaValidationError

from landing_api.config import settings
from landing_api.exceptions import DeliveryError, ValidationError
from landing_api.schemas.contact import CONTACT_FIELDS, ContactForm, ContactSubmission
from landing_api.schemas.email import EmailMessage
from landing_api.utils.email_mailjet import EmailSender, get_email_sender

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "First name, last name, email, and message are required"
INVALID_FIELDS_MESSAGE = "One or more contact fields are invalid"


def compose_contact_email(
    submission: ContactSubmission,
    from_email: str,
    to_email: str,
    from_name: Optional[str] = None,
    to_name: Optional[str] = None,
) -> EmailMessage:
    """Build the notification email for one submission.

    Values go into the text part verbatim. The HTML part escapes them and
    turns message newlines into ``<br>``.
    """
    full_name = f"{submission.first_name} {submission.last_name}"

    text_part = (
        f"Name: {full_name}\n"
        f"Email: {submission.email}\n"
        "\n"
        "Message:\n"
        f"{submission.message}\n"
    )

    html_message = html.escape(submission.message).replace("\r\n", "\n").replace("\n", "<br>")
    html_part = (
        f"<p><strong>Name:</strong> {html.escape(full_name)}</p>\n"
        f"<p><strong>Email:</strong> {html.escape(submission.email)}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{html_message}</p>\n"
    )

    return EmailMessage(
        from_email=from_email,
        from_name=from_name,
        to_email=to_email,
        to_name=to_name,
        subject=f"New contact from {full_name}",
        text_part=text_part,
        html_part=html_part,
    )


class ContactService:
    """Service class for relaying contact submissions to the email provider"""

    def __init__(
        self,
        sender: EmailSender,
        from_email: Optional[str],
        to_email: Optional[str],
        from_name: Optional[str] = None,
        to_name: Optional[str] = None,
        strict: bool = False,
    ):
        self.sender = sender
        self.from_email = from_email
        self.to_email = to_email
        self.from_name = from_name
        self.to_name = to_name
        self.strict = strict

    def validate(self, submission: ContactSubmission) -> None:
        """Raise ValidationError unless every field is present.

        In strict mode the client-side length and email rules apply too.
        """
        missing: List[str] = [
            wire_name
            for wire_name, attr in CONTACT_FIELDS.items()
            if not (getattr(submission, attr) or "").strip()
        ]
        if missing:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE, missing)

        if not self.strict:
            return

        try:
            ContactForm.model_validate(submission.model_dump(by_alias=True))
        except SchemaValidationError as exc:
            invalid = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
            raise ValidationError(INVALID_FIELDS_MESSAGE, invalid) from exc

    async def submit(self, submission: ContactSubmission) -> EmailMessage:
        """Validate one submission and hand it to the email provider.

        Returns the message that the provider accepted. Raises
        ValidationError before anything is sent, DeliveryError if the
        provider call fails.
        """
        self.validate(submission)

        if not (self.from_email and self.to_email):
            logger.error("EMAIL_FROM/EMAIL_TO not configured; cannot relay contact from %s", submission.email)
            raise DeliveryError("Contact email identities not configured")

        message = compose_contact_email(
            submission,
            from_email=self.from_email,
            to_email=self.to_email,
            from_name=self.from_name,
            to_name=self.to_name,
        )

        try:
            await self.sender.send(message)
        except DeliveryError as exc:
            logger.error("Error sending contact email for %s: %s", submission.email, exc)
            raise
        except Exception as exc:
            logger.exception("Unexpected error sending contact email for %s", submission.email)
            raise DeliveryError(str(exc)) from exc

        logger.info("Contact email sent for %s %s (%s)", submission.first_name, submission.last_name, submission.email)
        return message


def get_contact_service() -> ContactService:
    return ContactService(
        sender=get_email_sender(),
        from_email=settings.EMAIL_FROM,
        to_email=settings.EMAIL_TO,
        from_name=settings.EMAIL_FROM_NAME,
        to_name=settings.EMAIL_TO_NAME,
        strict=settings.CONTACT_STRICT_VALIDATION,
    )
