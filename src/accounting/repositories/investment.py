"""Repository for ProjectInvestment entity (company-scoped)."""

import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.accounting.models import ProjectInvestment
from src.accounting.repositories.base import BaseRepository


class ProjectInvestmentRepository(BaseRepository[ProjectInvestment]):
    """Repository for ProjectInvestment entity."""

    model = ProjectInvestment

    def _filtered(
        self,
        company_id: UUID,
        project_id: UUID,
        date_from: datetime.date | None,
        date_to: datetime.date | None,
    ) -> Any:
        query = select(ProjectInvestment).where(
            ProjectInvestment.company_id == company_id,
            ProjectInvestment.project_id == project_id,
        )
        if date_from is not None:
            query = query.where(ProjectInvestment.date >= date_from)
        if date_to is not None:
            query = query.where(ProjectInvestment.date <= date_to)
        return query

    async def list_filtered(
        self,
        company_id: UUID,
        project_id: UUID,
        date_from: datetime.date | None = None,
        date_to: datetime.date | None = None,
        page: int = 1,
        page_size: int = 25,
    ) -> tuple[list[ProjectInvestment], int]:
        """List a project's investments, newest date first, inclusive date range."""
        query = self._filtered(company_id, project_id, date_from, date_to)
        return await self.paginate(
            query,
            page,
            page_size,
            (ProjectInvestment.date.desc(), ProjectInvestment.created_at.desc()),  # type: ignore[attr-defined]
        )

    async def sum_amount(
        self,
        company_id: UUID,
        project_id: UUID,
        date_from: datetime.date | None = None,
        date_to: datetime.date | None = None,
    ) -> Decimal:
        """Sum of amounts over the whole filtered set (not just one page)."""
        filtered = self._filtered(company_id, project_id, date_from, date_to).subquery()
        result = await self.session.execute(select(func.coalesce(func.sum(filtered.c.amount), 0)))
        return Decimal(str(result.scalar_one()))
