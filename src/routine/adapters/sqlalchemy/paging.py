"""SQLAlchemy adapter – SqlAlchemyPageSource."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyPageSource:
    """:class:`~routine.application.pagination.PageSource` over an ORM ``Select``.

    ``count`` wraps the statement (minus its ``ORDER BY``) in a subquery, so
    the total always reflects the statement's own filter.
    """

    def __init__(self, session: AsyncSession, statement: Select[Any]) -> None:
        self._session = session
        self._statement = statement

    async def count(self) -> int:
        subquery = self._statement.order_by(None).subquery()
        result = await self._session.execute(select(func.count()).select_from(subquery))
        return result.scalar_one()

    async def fetch(self, offset: int, limit: int) -> list[Any]:
        result = await self._session.execute(self._statement.offset(offset).limit(limit))
        return list(result.scalars().all())


__all__ = ["SqlAlchemyPageSource"]
