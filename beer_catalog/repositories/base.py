"""Generic async repository over a single AsyncSession."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from beer_catalog.db.base import Base
from beer_catalog.domain.mixins import utcnow

ModelT = TypeVar("ModelT", bound=Base)

# Columns owned by the database/ORM; update() never writes them.
_SERVER_OWNED = frozenset({"id", "version", "created_at", "updated_at"})


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Rows are hard-deleted. Writes go through the unit of work (flush, not bulk
    UPDATE) so mapper features such as ``version_id_col`` apply.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def find(self, *criteria: ColumnElement[bool]) -> list[ModelT]:
        """Return every row matching all *criteria* (all rows when none given)."""
        q = select(self.model)
        if criteria:
            q = q.where(*criteria)
        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        for key in _SERVER_OWNED:
            kwargs.pop(key, None)
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id / version
        await self._session.refresh(instance)
        return instance

    async def update(self, instance: ModelT, **kwargs: Any) -> ModelT:
        """Apply *kwargs* to *instance* in place and flush.

        ``updated_at`` is always refreshed, so every call emits an UPDATE and
        bumps the version even when the values are unchanged.
        """
        for key, value in kwargs.items():
            if key in _SERVER_OWNED:
                continue
            setattr(instance, key, value)
        if hasattr(instance, "updated_at"):
            instance.updated_at = utcnow()
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self._session.delete(instance)
        await self._session.flush()

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(self.model))
        await self._session.flush()
        return result.rowcount
