import logging
import re
from model.subscriber import Subscriber
from schema import Outcome
import error

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_EMAIL = "Email inválido"
ALREADY_SUBSCRIBED = "Este email ya está suscrito."
SERVER_ERROR = "Error interno."
SUBSCRIBED = "¡Gracias por suscribirte!"


def is_valid_email(email) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


class SubscriptionOp:
    def __init__(self, store):
        self.store = store

    async def subscribe(self, email: str) -> Outcome:
        if not email or not is_valid_email(email):
            raise error.ValidationError(msg=INVALID_EMAIL)

        try:
            # Early exit only, the unique constraint decides on insert
            existing = await self.store.find_one(Subscriber, email=email)
            if existing:
                raise error.DuplicateError(msg=ALREADY_SUBSCRIBED)
            await self.store.insert(Subscriber(email=email))
        except error.DatabaseIntegrityError as e:
            logger.info(f"Concurrent subscription rejected for {email}")
            raise error.DuplicateError(msg=ALREADY_SUBSCRIBED) from e
        except error.DatabaseError as e:
            logger.error(f"Subscription failed for {email}: {e.msg}")
            raise error.PersistenceError(msg=SERVER_ERROR) from e

        logger.info(f"New subscriber: {email}")
        return Outcome(success=True, message=SUBSCRIBED)
