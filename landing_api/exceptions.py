"""Failure kinds of the contact submission workflow."""

from typing import List, Optional


class ContactError(Exception):
    """Base class for contact workflow failures"""


class ValidationError(ContactError):
    """One or more required submission fields are missing or malformed.

    ``fields`` lists the offending field names (wire names, e.g. ``firstName``).
    """

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class DeliveryError(ContactError):
    """The email provider could not accept the message."""
