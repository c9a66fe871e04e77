from pydantic import BaseModel
from typing import Optional


class OutboundMessage(BaseModel):
    sender_name: str
    to: str
    subject: str
    html: str
    reply_to: Optional[str] = None
