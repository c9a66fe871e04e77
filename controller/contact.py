import asyncio
import logging
from html import escape
from config.setting import Settings, settings as default_settings
from model.contact import ContactMessage
from schema import Outcome
from schema.email import OutboundMessage
import error

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = "Todos los campos son requeridos"
SERVER_ERROR = "Error interno del servidor."
RECEIVED = "¡Mensaje recibido! Te contactaré pronto."


class ContactOp:
    """Contact form pipeline: validate, persist, notify both parties

    The record is written before any email goes out. Both emails are
    sent concurrently and the request fails if either of them fails,
    in which case the stored record is kept as is.
    """

    def __init__(self, store, mailer, settings: Settings = default_settings):
        self.store = store
        self.mailer = mailer
        self.settings = settings

    async def submit_contact(
        self, name: str, email: str, subject: str, message: str
    ) -> Outcome:
        fields = (name, email, subject, message)
        if any(not value or not str(value).strip() for value in fields):
            raise error.ValidationError(msg=REQUIRED_FIELDS)

        contact = ContactMessage(
            name=name, email=email, subject=subject, message=message
        )
        try:
            await self.store.insert(contact)
        except error.DatabaseError as e:
            logger.error(f"Failed to store contact from {email}: {e.msg}")
            raise error.PersistenceError(msg=SERVER_ERROR) from e
        logger.info(f"Contact saved: {email}")

        await self._dispatch(
            self._owner_notification(contact),
            self._acknowledgement(contact),
        )
        logger.info(f"Notification and acknowledgement sent for {email}")
        return Outcome(success=True, message=RECEIVED)

    async def _dispatch(self, *messages: OutboundMessage) -> None:
        # Join on every send before deciding, a failed branch does not
        # cancel the others.
        results = await asyncio.gather(
            *(self.mailer.send(message) for message in messages),
            return_exceptions=True,
        )
        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            for failure in failures:
                logger.error(f"Email dispatch failed: {failure}")
            raise error.DispatchError(msg=SERVER_ERROR) from failures[0]

    def _owner_notification(self, contact: ContactMessage) -> OutboundMessage:
        name, email = escape(contact.name), escape(contact.email)
        subject, message = escape(contact.subject), escape(contact.message)
        return OutboundMessage(
            sender_name=self.settings.MAIL_NOTIFICATION_FROM_NAME,
            to=self.settings.OWNER_EMAIL,
            reply_to=contact.email,
            subject=f"🚀 Nuevo Mensaje: {contact.subject}",
            html=(
                "<h3>Tienes un nuevo mensaje de contacto</h3>"
                f"<p><strong>Nombre:</strong> {name}</p>"
                f"<p><strong>Email:</strong> {email}</p>"
                f"<p><strong>Asunto:</strong> {subject}</p>"
                "<p><strong>Mensaje:</strong></p>"
                f"<p>{message}</p>"
            ),
        )

    def _acknowledgement(self, contact: ContactMessage) -> OutboundMessage:
        owner = escape(self.settings.OWNER_NAME)
        return OutboundMessage(
            sender_name=self.settings.OWNER_NAME,
            to=contact.email,
            subject=f"Confirmación de recepción - {self.settings.OWNER_NAME}",
            html=(
                f"<h3>¡Hola {escape(contact.name)}!</h3>"
                "<p>He recibido tu mensaje correctamente respecto a: "
                f"<strong>\"{escape(contact.subject)}\"</strong>.</p>"
                "<p>Te agradezco el interés. Revisaré los detalles y me pondré "
                "en contacto contigo lo antes posible.</p>"
                "<br>"
                "<p>Saludos cordiales,</p>"
                f"<p><strong>{owner}</strong><br>{escape(self.settings.OWNER_TITLE)}</p>"
            ),
        )
