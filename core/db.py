from sqlalchemy.ext.asyncio import AsyncSession
from core.setup import DatabaseSetup


class CreateAsyncDBSession:
    """Asynchronous database session context manager"""
    def __init__(self, database: DatabaseSetup):
        self.db_factory = database.get_session()
        self.session = None

    async def __aenter__(self) -> AsyncSession:
        self.session = self.db_factory()
        return self.session

    async def __aexit__(self, exc_type, exc_value, exc_traceback):
        if self.session:
            if exc_type is not None:
                await self.session.rollback()
            await self.session.close()
