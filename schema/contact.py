from pydantic import BaseModel
from typing import Optional


class ContactFormIn(BaseModel):
    # Presence is checked by the contact pipeline so that missing
    # fields answer 400 with the form's own message.
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
