import logging
from typing import Optional, Type
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from core.db import CreateAsyncDBSession
from core.setup import Base, DatabaseSetup
from util.enum import DbState
import error

logger = logging.getLogger(__name__)


class RecordStore:
    """Persistence for contact messages and subscribers

    Driver failures are translated into the error.Database*
    family so callers never deal with SQLAlchemy exceptions.
    """

    def __init__(self, database: DatabaseSetup):
        self.database = database

    async def insert(self, record: Base) -> int:
        try:
            await self.database.ensure_schema()
            async with CreateAsyncDBSession(self.database) as session:
                session.add(record)
                await session.commit()
                return record.id
        except IntegrityError as e:
            raise error.DatabaseIntegrityError(
                msg=f"Constraint violated on {record.__tablename__}"
            ) from e
        except SQLAlchemyError as e:
            raise error.DatabaseError(
                msg=f"Could not write to {record.__tablename__}: {e}"
            ) from e
        except OSError as e:
            raise error.DatabaseError(msg=f"Database unreachable: {e}") from e

    async def find_one(self, model: Type[Base], **filters) -> Optional[Base]:
        try:
            await self.database.ensure_schema()
            async with CreateAsyncDBSession(self.database) as session:
                result = await session.execute(
                    select(model).filter_by(**filters).limit(1)
                )
                return result.scalars().first()
        except SQLAlchemyError as e:
            raise error.DatabaseError(
                msg=f"Could not read {model.__tablename__}: {e}"
            ) from e
        except OSError as e:
            raise error.DatabaseError(msg=f"Database unreachable: {e}") from e

    def connection_state(self) -> DbState:
        return self.database.connection_state()
