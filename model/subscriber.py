from sqlalchemy import Column, DateTime, Integer, String
from core.setup import Base
from model.contact import utc_now


class Subscriber(Base):
    """
    A newsletter subscriber. The unique constraint on email is the
    authoritative duplicate guard.
    """

    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(320), unique=True, nullable=False)
    subscribed_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
