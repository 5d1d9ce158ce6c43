"""Integration test fixtures for database and HTTP client operations.

The app runs against an in-memory SQLite database (aiosqlite) built from
SQLModel metadata. StaticPool keeps one connection alive so the test
session and the app's request sessions see the same database.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.accounting.core import db
from src.accounting.main import create_app
from src.accounting.models import Company, Product, Project, User, UserRole
from tests.factories import CompanyFactory, ProductFactory, ProjectFactory
from tests.helpers import create_user


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database and make the app use it."""
    await db.dispose_engine()

    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    db._engine = test_engine
    yield test_engine

    db._engine = None
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit. Commit before issuing requests so the
    app sees the data.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@dataclass
class World:
    """Two companies, each with a project and a product."""

    company: Company
    accountant: User
    viewer: User
    project: Project
    product: Product
    other_company: Company
    other_user: User
    other_project: Project
    other_product: Product


@pytest.fixture
async def world(db_session: AsyncSession) -> World:
    company = CompanyFactory.build(name="Acme Builders")
    other_company = CompanyFactory.build(name="Rival Construction")
    db_session.add_all([company, other_company])
    await db_session.flush()

    accountant = await create_user(db_session, company, UserRole.ACCOUNTANT)
    viewer = await create_user(db_session, company, UserRole.VIEWER)
    other_user = await create_user(db_session, other_company, UserRole.ADMIN)

    project = ProjectFactory.build(company_id=company.id, name="Tower A")
    other_project = ProjectFactory.build(company_id=other_company.id, name="Rival Tower")
    product = ProductFactory.build(
        company_id=company.id,
        code="CEM-01",
        name="Cement",
        default_purchase_price=Decimal("19.999"),
    )
    other_product = ProductFactory.build(company_id=other_company.id, code="CEM-01")
    db_session.add_all([project, other_project, product, other_product])
    await db_session.commit()

    return World(
        company=company,
        accountant=accountant,
        viewer=viewer,
        project=project,
        product=product,
        other_company=other_company,
        other_user=other_user,
        other_project=other_project,
        other_product=other_product,
    )


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create test client without a session cookie."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
