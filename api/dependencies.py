from fastapi import Depends, Request
from config.setting import settings
from controller.contact import ContactOp
from controller.health import HealthOp
from controller.subscriber import SubscriptionOp
from service.email import MailService
from service.rate_limit import FixedWindowRateLimiter
from service.store import RecordStore


contact_limiter = FixedWindowRateLimiter(
    scope="contact",
    limit=settings.CONTACT_RATE_LIMIT,
    window_seconds=settings.CONTACT_RATE_WINDOW_SECONDS,
    enabled=settings.CONTACT_RATE_LIMIT_ENABLED,
)


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_mail_service(request: Request) -> MailService:
    return request.app.state.mail_service


def get_contact_op(
    store: RecordStore = Depends(get_record_store),
    mailer: MailService = Depends(get_mail_service),
) -> ContactOp:
    return ContactOp(store, mailer, settings)


def get_subscription_op(
    store: RecordStore = Depends(get_record_store),
) -> SubscriptionOp:
    return SubscriptionOp(store)


def get_health_op(store: RecordStore = Depends(get_record_store)) -> HealthOp:
    return HealthOp(store)
