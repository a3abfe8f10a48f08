"""
Read-only access to restaurants and their owned menus/menu items.

Relations to load alongside a restaurant are given as typed load paths:
ordered tuples of relationship attributes, each turned into a chain of
``selectinload`` options (one extra SELECT per hop, stitched by the ORM).
"""

import asyncio
import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import Select, select
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import QueryableAttribute, selectinload

from app.models import Menu, Restaurant

logger = logging.getLogger(__name__)

LoadPath = tuple[QueryableAttribute, ...]

MENUS_WITH_ITEMS: LoadPath = (Restaurant.menus, Menu.menu_items)


class PersistenceError(Exception):
    """The relational store failed to answer a query. Not retried."""


def _eager_options(load: Sequence[LoadPath]) -> list:
    options = []
    for path in load:
        if not path:
            continue
        head, *rest = path
        option = selectinload(head)
        for attr in rest:
            option = option.selectinload(attr)
        options.append(option)
    return options


class RestaurantRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        # Root fields resolve concurrently; an AsyncSession allows one operation at a time.
        self._lock = asyncio.Lock()

    async def find_by_id(
        self,
        restaurant_id: uuid.UUID | None,
        load: Sequence[LoadPath] = (),
    ) -> Restaurant | None:
        """Return the matching restaurant, or None when nothing matches."""
        if restaurant_id is None:
            return None
        stmt = (
            select(Restaurant)
            .where(Restaurant.id == restaurant_id)
            .options(*_eager_options(load))
        )
        result = await self._execute(stmt)
        return result.scalars().first()

    async def find_all(self, load: Sequence[LoadPath] = ()) -> list[Restaurant]:
        stmt = select(Restaurant).options(*_eager_options(load))
        result = await self._execute(stmt)
        return list(result.scalars().all())

    async def _execute(self, stmt: Select) -> Result:
        try:
            async with self._lock:
                return await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Restaurant query failed", extra={"error": str(exc)})
            raise PersistenceError(f"Restaurant query failed: {exc}") from exc
