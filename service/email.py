import logging
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors

from config.setting import Settings, settings as default_settings
from schema.email import OutboundMessage
import error

logger = logging.getLogger(__name__)


class MailService:
    """Sends one html message at a time through the configured SMTP relay

    The sender address is fixed by configuration, each message only
    chooses the display name shown to the recipient.
    """

    def __init__(self, settings: Settings = default_settings):
        self.settings = settings
        self._configs: dict[str, ConnectionConfig] = {}

    def _mail_config(self, sender_name: str) -> ConnectionConfig:
        if sender_name not in self._configs:
            self._configs[sender_name] = ConnectionConfig(
                MAIL_USERNAME=self.settings.MAIL_USERNAME,
                MAIL_PASSWORD=str(self.settings.MAIL_PASSWORD).strip(),
                MAIL_FROM=self.settings.MAIL_FROM,
                MAIL_FROM_NAME=sender_name,
                MAIL_PORT=self.settings.MAIL_PORT,
                MAIL_SERVER=self.settings.MAIL_SERVER,
                MAIL_SSL_TLS=self.settings.MAIL_SSL_TLS,
                MAIL_STARTTLS=self.settings.MAIL_STARTTLS,
                USE_CREDENTIALS=self.settings.USE_CREDENTIALS,
                VALIDATE_CERTS=self.settings.VALIDATE_CERTS,
                MAIL_DEBUG=int(self.settings.MAIL_DEBUG),
                SUPPRESS_SEND=int(self.settings.MAIL_SUPPRESS_SEND),
            )
        return self._configs[sender_name]

    async def send(self, message: OutboundMessage) -> bool:
        schema = MessageSchema(
            subject=message.subject,
            recipients=[message.to],
            reply_to=[message.reply_to] if message.reply_to else [],
            body=message.html,
            subtype=MessageType.html,
        )
        fm = FastMail(self._mail_config(message.sender_name))
        try:
            await fm.send_message(schema)
        except ConnectionErrors as e:
            logger.error(f"Failed to send message to {message.to} -> {e}")
            raise error.DispatchError(msg=f"Mail relay refused message: {e}") from e
        logger.info(f"Email sent to {message.to}")
        return True
