from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import EmailStr


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./portfolio.db"
    DB_ECHO: bool = False
    API_PREFIX: str = "/api"
    PORT: int = 5001
    FRONTEND_URL: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str = ""
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_FROM: EmailStr = "contacto@juliomunoz.dev"
    MAIL_PORT: int = 465
    MAIL_SERVER: str = "localhost"
    MAIL_NOTIFICATION_FROM_NAME: str = "Portfolio"
    MAIL_SSL_TLS: bool = True
    MAIL_STARTTLS: bool = False
    USE_CREDENTIALS: bool = True
    VALIDATE_CERTS: bool = True
    MAIL_DEBUG: bool = False
    MAIL_SUPPRESS_SEND: bool = False
    OWNER_EMAIL: EmailStr = "julio.mun.cor@gmail.com"
    OWNER_NAME: str = "Julio Muñoz"
    OWNER_TITLE: str = "Software Engineer"
    CONTACT_RATE_LIMIT_ENABLED: bool = True
    CONTACT_RATE_LIMIT: int = 5
    CONTACT_RATE_WINDOW_SECONDS: int = 15 * 60

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
