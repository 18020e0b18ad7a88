import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from legal_catalog.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Общий доступ к сессии и перевод ошибок SQLAlchemy в StoreError"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def dialect_name(self) -> str:
        return self.session.get_bind().dialect.name

    async def _execute(self, stmt):
        """Выполнение запроса"""
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Query failed")
            raise StoreError("Database query failed") from e

    async def _commit(self, refresh=None) -> None:
        """Фиксация транзакции; при ошибке откат и StoreError"""
        try:
            await self.session.commit()
            if refresh is not None:
                await self.session.refresh(refresh)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Commit failed")
            raise StoreError("Database write failed") from e
