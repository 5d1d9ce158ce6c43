"""Test helper functions for common data creation patterns."""

from datetime import date
from decimal import Decimal

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.config import get_settings
from src.accounting.core.security import create_access_token
from src.accounting.models import Company, Project, ProjectInvestment, User, UserRole
from tests.factories import ProjectInvestmentFactory, UserFactory


async def create_user(
    session: AsyncSession,
    company: Company,
    role: UserRole = UserRole.ACCOUNTANT,
    **user_kwargs,
) -> User:
    """Create a user of ``company`` with the given role.

    Args:
        session: Database session
        company: Company the user belongs to
        role: Role of the user (default: ACCOUNTANT)
        **user_kwargs: Additional args passed to UserFactory

    Returns:
        The flushed user
    """
    user = UserFactory.build(company_id=company.id, role=role.value, **user_kwargs)
    session.add(user)
    await session.flush()
    return user


async def create_investments(
    session: AsyncSession,
    project: Project,
    rows: list[tuple[date, str]],
    **investment_kwargs,
) -> list[ProjectInvestment]:
    """Create one investment per (date, amount) row in ``project``."""
    investments = [
        ProjectInvestmentFactory.build(
            company_id=project.company_id,
            project_id=project.id,
            date=day,
            amount=Decimal(amount),
            **investment_kwargs,
        )
        for day, amount in rows
    ]
    session.add_all(investments)
    await session.flush()
    return investments


def login_as(client: AsyncClient, user: User) -> AsyncClient:
    """Give ``client`` a session cookie for ``user``."""
    token = create_access_token(user.id, user.company_id)
    client.cookies.set(get_settings().session_cookie_name, token)
    return client
