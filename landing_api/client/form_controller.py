"""Client side of the landing page contact form.

``ContactFormController`` owns the form state of one contact form view: the
field values, per-field error text and the in-flight flag that disables the
submit control. Outcomes are reported as ``Toast`` notifications through a
callback, the way the page shows them to the visitor.
"""

import logging
from typing import Callable, Dict, Literal, Optional

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from landing_api.schemas.contact import CONTACT_FIELDS, ContactForm

logger = logging.getLogger(__name__)

FIELD_MESSAGES: Dict[str, str] = {
    "firstName": "First name must be at least 2 characters",
    "lastName": "Last name must be at least 2 characters",
    "email": "Please enter a valid email address",
    "message": "Message must be at least 10 characters",
}

SUBMIT_LABEL = "Send Message"
SUBMITTING_LABEL = "Sending..."


class Toast(BaseModel):
    """A transient notification shown after a submission"""
    kind: Literal["success", "error"]
    title: str
    description: str


SENT_TOAST = Toast(
    kind="success",
    title="Message sent successfully!",
    description="Thank you for your interest. We'll get back to you soon.",
)
FAILED_TITLE = "Failed to send message"
FAILED_FALLBACK = "Please try again later."
UNREACHABLE_TOAST = Toast(
    kind="error",
    title="Something went wrong",
    description="Please check your connection and try again.",
)


def _log_toast(toast: Toast) -> None:
    level = logging.INFO if toast.kind == "success" else logging.WARNING
    logger.log(level, "%s %s", toast.title, toast.description)


def empty_values() -> Dict[str, str]:
    return {field: "" for field in CONTACT_FIELDS}


class ContactFormController:
    """State and submission lifecycle of one contact form"""

    def __init__(
        self,
        endpoint: str,
        notify: Optional[Callable[[Toast], None]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.endpoint = endpoint
        self.notify = notify or _log_toast
        self._client = client
        self.values: Dict[str, str] = empty_values()
        self.errors: Dict[str, str] = {}
        self.is_submitting = False

    @property
    def submit_disabled(self) -> bool:
        return self.is_submitting

    @property
    def submit_label(self) -> str:
        return SUBMITTING_LABEL if self.is_submitting else SUBMIT_LABEL

    def _check(self) -> Dict[str, str]:
        try:
            ContactForm.model_validate(self.values)
        except SchemaValidationError as exc:
            failing = {str(error["loc"][0]) for error in exc.errors() if error.get("loc")}
            return {field: FIELD_MESSAGES[field] for field in CONTACT_FIELDS if field in failing}
        return {}

    def set_value(self, field: str, value: str) -> None:
        """Record a change; a field already showing an error is re-checked."""
        if field not in CONTACT_FIELDS:
            raise KeyError(f"Unknown contact form field: {field}")
        self.values[field] = value
        if field in self.errors:
            self.validate_field(field)

    def validate_field(self, field: str) -> Optional[str]:
        """Check one field (on blur) and return its error text, if any."""
        if field not in CONTACT_FIELDS:
            raise KeyError(f"Unknown contact form field: {field}")
        error = self._check().get(field)
        if error:
            self.errors[field] = error
        else:
            self.errors.pop(field, None)
        return error

    def validate(self) -> bool:
        self.errors = self._check()
        return not self.errors

    def reset(self) -> None:
        self.values = empty_values()
        self.errors = {}

    async def _post(self, payload: Dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.endpoint, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.endpoint, json=payload)

    def _emit(self, toast: Toast) -> Toast:
        try:
            self.notify(toast)
        except Exception:
            logger.exception("Toast callback failed")
        return toast

    async def submit(self) -> Optional[Toast]:
        """Validate and send the form once.

        Returns the toast that was shown, or None when nothing was sent
        (invalid fields, or a submission already in flight). Never raises
        for network or server failures.
        """
        if self.is_submitting:
            logger.debug("Contact form submission already in flight; ignoring submit")
            return None

        if not self.validate():
            return None

        self.is_submitting = True
        try:
            try:
                response = await self._post(dict(self.values))
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.error("Error submitting contact form: %s", exc)
                return self._emit(UNREACHABLE_TOAST)

            if response.is_success and isinstance(data, dict) and data.get("success") is True:
                self.reset()
                return self._emit(SENT_TOAST)

            error = data.get("error") if isinstance(data, dict) else None
            return self._emit(Toast(
                kind="error",
                title=FAILED_TITLE,
                description=str(error) if error else FAILED_FALLBACK,
            ))
        finally:
            self.is_submitting = False
