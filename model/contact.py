from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, String, Text
from core.setup import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContactMessage(Base):
    """
    A contact form submission. Written once, never updated.
    """

    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
