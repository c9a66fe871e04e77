from pydantic import BaseModel
from typing import Optional


class SubscribeIn(BaseModel):
    email: Optional[str] = None
