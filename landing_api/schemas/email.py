from pydantic import BaseModel
from typing import Optional


class EmailMessage(BaseModel):
    """One outbound transactional email"""
    from_email: str
    from_name: Optional[str] = None
    to_email: str
    to_name: Optional[str] = None
    subject: str
    text_part: str
    html_part: str
