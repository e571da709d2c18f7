from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Dict, Literal, Optional


# Wire name -> attribute name, in form order
CONTACT_FIELDS: Dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "message": "message",
}


class ContactSubmission(BaseModel):
    """Contact form payload as received by the handler.

    Every field is optional here so that absent fields reach the presence
    check and are reported with the contact error contract instead of a
    generic request validation error.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    message: Optional[str] = None


class ContactForm(BaseModel):
    """Contact form rules applied before a submission leaves the client"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName", min_length=2)
    last_name: str = Field(alias="lastName", min_length=2)
    email: EmailStr
    message: str = Field(min_length=10)

    @field_validator("email", mode="before")
    @classmethod
    def bare_address_only(cls, value):
        # EmailStr also parses "Name <addr>" and surrounding whitespace
        if isinstance(value, str) and (value != value.strip() or "<" in value or ">" in value):
            raise ValueError("email must be a bare address")
        return value


class ContactSuccessResponse(BaseModel):
    """Contact success response schema"""
    message: str
    success: Literal[True] = True


class ContactErrorResponse(BaseModel):
    """Contact failure response schema"""
    error: str
    success: Literal[False] = False
