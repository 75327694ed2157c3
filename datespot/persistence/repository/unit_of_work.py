"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from datespot.domain.error import RemoteStoreError
from datespot.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Commits the request-scoped session shared by the repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logfire.error("Commit failed", error=str(e))
            await self.session.rollback()
            raise RemoteStoreError("commit", str(e), retryable=True)

    async def rollback(self) -> None:
        await self.session.rollback()
