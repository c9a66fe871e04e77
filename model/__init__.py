from model.contact import ContactMessage
from model.subscriber import Subscriber

__all__ = ["ContactMessage", "Subscriber"]
