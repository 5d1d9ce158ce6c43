"""Project investment use cases: list with totals, create, partial update."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.logging import get_logger
from src.accounting.models import AuditAction, Project, ProjectInvestment
from src.accounting.models.base import utc_now
from src.accounting.repositories import (
    AuditLogRepository,
    ProjectInvestmentRepository,
    ProjectRepository,
)
from src.accounting.schemas.investment import (
    ProjectInvestmentCreate,
    ProjectInvestmentListFilters,
    ProjectInvestmentRead,
    ProjectInvestmentUpdate,
)
from src.accounting.schemas.pagination import PageInfo, page_info
from src.accounting.services.access import AuthContext
from src.accounting.services.audit_service import AuditService

logger = get_logger(__name__)

ENTITY_TYPE = "ProjectInvestment"


class ProjectNotFoundError(Exception):
    """Project is absent or belongs to another company."""


class InvestmentNotFoundError(Exception):
    """Investment is absent, belongs to another company, or to another project."""


@dataclass(frozen=True)
class InvestmentPage:
    project: Project
    items: list[ProjectInvestment]
    pagination: PageInfo
    total_amount: Decimal


def _snapshot(investment: ProjectInvestment) -> dict[str, Any]:
    return ProjectInvestmentRead.model_validate(investment).model_dump(mode="json")


class InvestmentService:
    """Investment operations for one authenticated caller.

    Every lookup is scoped to the caller's company.
    """

    def __init__(self, session: AsyncSession, auth: AuthContext):
        self.session = session
        self.auth = auth
        self.projects = ProjectRepository(session)
        self.investments = ProjectInvestmentRepository(session)
        self.audit = AuditService(AuditLogRepository(session), session, auth.company_id)

    async def _get_project(self, project_id: UUID | str) -> Project:
        project = await self.projects.get_for_company(project_id, self.auth.company_id)
        if project is None:
            raise ProjectNotFoundError(str(project_id))
        return project

    async def list_investments(
        self,
        project_id: UUID | str,
        filters: ProjectInvestmentListFilters,
    ) -> InvestmentPage:
        """One page of a project's investments plus the total over all matching rows."""
        project = await self._get_project(project_id)
        items, total = await self.investments.list_filtered(
            self.auth.company_id,
            project.id,
            date_from=filters.date_from,
            date_to=filters.date_to,
            page=filters.page,
            page_size=filters.page_size,
        )
        total_amount = await self.investments.sum_amount(
            self.auth.company_id,
            project.id,
            date_from=filters.date_from,
            date_to=filters.date_to,
        )
        return InvestmentPage(
            project=project,
            items=items,
            pagination=page_info(filters.page, filters.page_size, total),
            total_amount=total_amount,
        )

    async def create_investment(self, data: ProjectInvestmentCreate) -> ProjectInvestment:
        project = await self._get_project(data.project_id)

        investment = ProjectInvestment(
            company_id=self.auth.company_id,
            project_id=project.id,
            date=data.date,
            amount=data.amount,
            note=data.note or None,
            created_by_user_id=self.auth.user_id,
        )
        self.investments.add(investment)

        try:
            await self.session.commit()
            await self.session.refresh(investment)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "investment.created",
            investment_id=str(investment.id),
            project_id=str(project.id),
        )
        await self.audit.record(
            AuditAction.CREATE,
            ENTITY_TYPE,
            investment.id,
            actor_user_id=self.auth.user_id,
            after=_snapshot(investment),
        )
        return investment

    async def update_investment(
        self,
        project_id: UUID | str,
        investment_id: UUID | str,
        data: ProjectInvestmentUpdate,
    ) -> ProjectInvestment:
        """Apply only the fields the caller supplied.

        Raises:
            InvestmentNotFoundError: The investment is not under this project of the
                caller's company.
            ProjectNotFoundError: A supplied ``project_id`` to move to is not the
                caller's.
        """
        project = await self.projects.get_for_company(project_id, self.auth.company_id)
        investment = await self.investments.get_for_company(investment_id, self.auth.company_id)
        if project is None or investment is None or investment.project_id != project.id:
            raise InvestmentNotFoundError(str(investment_id))

        before = _snapshot(investment)
        changes = data.model_dump(exclude_unset=True)

        if "project_id" in changes:
            target = await self._get_project(changes["project_id"])
            investment.project_id = target.id
        if "date" in changes:
            investment.date = changes["date"]
        if "amount" in changes:
            investment.amount = changes["amount"]
        if "note" in changes:
            investment.note = changes["note"] or None

        investment.updated_at = utc_now()

        try:
            await self.session.commit()
            await self.session.refresh(investment)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "investment.updated",
            investment_id=str(investment.id),
            fields=sorted(changes),
        )
        await self.audit.record(
            AuditAction.UPDATE,
            ENTITY_TYPE,
            investment.id,
            actor_user_id=self.auth.user_id,
            before=before,
            after=_snapshot(investment),
        )
        return investment
