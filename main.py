import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from api.v1.router import contact_router, health_router, subscribe_router
from core.setup import database
from config.setting import settings
from error import ServerError
from middleware.security import SecurityHeadersMiddleware
from service.email import MailService
from service.store import RecordStore
import handler as hlp
import model  # noqa: F401  registers tables on Base.metadata

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.record_store = RecordStore(database)
    app.state.mail_service = MailService(settings)
    await database.connect()
    yield
    await database.dispose()


app = FastAPI(
    title="Portfolio API",
    version="1.0.0",
    description="Contact form and newsletter backend",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)


app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
app.add_exception_handler(StarletteHTTPException, hlp.http_exceptions_handler)
app.add_exception_handler(ServerError, hlp.server_error_handler)
app.add_exception_handler(Exception, hlp.unexpected_error_handler)


app.include_router(health_router, prefix=settings.API_PREFIX)
app.include_router(contact_router, prefix=settings.API_PREFIX)
app.include_router(subscribe_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return responses.RedirectResponse("/docs")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server listening on port {settings.PORT}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
