"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def get_for_company(self, id: UUID | str, company_id: UUID) -> ModelType | None:
        """Get a record only if it belongs to ``company_id``.

        The company is part of the lookup predicate, so a row owned by
        another company is indistinguishable from a missing one. Ids that
        are not UUIDs match nothing.
        """
        if not isinstance(id, UUID):
            try:
                id = UUID(str(id))
            except ValueError:
                return None
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.company_id == company_id,  # type: ignore[attr-defined]
            )
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def count(self, query: Any) -> int:
        """Count the rows a query would return."""
        result = await self.session.execute(
            select(func.count()).select_from(query.order_by(None).subquery())
        )
        return int(result.scalar_one())

    async def paginate(
        self,
        query: Any,
        page: int,
        page_size: int,
        order_by: Any,
    ) -> tuple[list[ModelType], int]:
        """Execute page-number pagination on a query.

        Args:
            query: The base query to paginate
            page: 1-based page number
            page_size: Rows per page
            order_by: Ordering clause(s); pages are only stable under a total order

        Returns:
            Tuple of (items on this page, total rows matching the query).
            A page past the last row is empty.
        """
        total = await self.count(query)
        offset = (page - 1) * page_size
        if offset >= total:
            return [], total
        ordering = order_by if isinstance(order_by, tuple | list) else (order_by,)
        result = await self.session.execute(
            query.order_by(*ordering).offset(offset).limit(page_size)
        )
        return list(result.scalars().all()), total
