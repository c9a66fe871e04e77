import asyncio
import logging
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from config.setting import settings
from util.enum import DbState

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseSetup:
    """Owns the async engine and tracks whether the store is reachable

    The connection state is a flag maintained by engine events, so
    reading it never touches the database. Tables are created on the
    first connection that succeeds, at startup or later.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self._connected = False
        self._schema_ready = False
        self._schema_lock = asyncio.Lock()
        self._engine = create_async_engine(url, echo=echo, pool_pre_ping=True)
        self._session_maker = async_sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )
        event.listen(self._engine.sync_engine, "connect", self._on_connect)
        event.listen(self._engine.sync_engine, "handle_error", self._on_error)

    def _on_connect(self, dbapi_connection, connection_record) -> None:
        self._connected = True

    def _on_error(self, context) -> None:
        if context.is_disconnect:
            logger.warning("Database connection lost")
            self._connected = False

    async def ensure_schema(self) -> None:
        """Create missing tables once; raises if the store is unreachable"""
        if self._schema_ready:
            return
        async with self._schema_lock:
            if self._schema_ready:
                return
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
                await conn.execute(text("SELECT 1"))
            self._schema_ready = True
            logger.info("Database schema ready")

    async def connect(self) -> bool:
        """Create tables and verify the store answers

        Failures are logged and leave the state Disconnected,
        the process keeps serving.
        """
        logger.info("Connecting to database...")
        try:
            await self.ensure_schema()
        except Exception as e:
            self._connected = False
            logger.error(f"Database connection failed: {e}")
            return False
        self._connected = True
        logger.info("Database connected")
        return True

    async def dispose(self) -> None:
        await self._engine.dispose()
        self._connected = False

    def connection_state(self) -> DbState:
        return DbState.connected if self._connected else DbState.disconnected

    def get_session(self) -> async_sessionmaker:
        """Grant session

            This method returns the async
            session factory
        Returns:
            object: database session factory
        """
        return self._session_maker


database = DatabaseSetup(settings.DATABASE_URL, echo=settings.DB_ECHO)
