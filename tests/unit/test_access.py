"""Unit tests for session authentication and capability checks."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest

from src.accounting.core.exceptions import ForbiddenError, UnauthorizedError
from src.accounting.core.security import create_access_token
from src.accounting.services.access import authenticate, require_permission
from tests.factories import CompanyFactory, UserFactory

pytestmark = pytest.mark.unit

ACCESS = "src.accounting.services.access"


@pytest.fixture
def company():
    return CompanyFactory.build()


@pytest.fixture
def user(company):
    return UserFactory.build(company_id=company.id, hashed_password="unused")


def _session_for(company) -> AsyncMock:
    session = AsyncMock()
    session.get = AsyncMock(return_value=company)
    return session


def _users_returning(user) -> MagicMock:
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=user)
    return repo


async def test_valid_session(company, user):
    token = create_access_token(user.id, company.id)

    with patch(f"{ACCESS}.UserRepository", return_value=_users_returning(user)):
        auth = await authenticate(_session_for(company), token)

    assert auth.user_id == user.id
    assert auth.company_id == company.id
    assert auth.role == user.role
    assert auth.email == user.email


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
async def test_missing_or_garbled_token(token):
    with pytest.raises(UnauthorizedError):
        await authenticate(AsyncMock(), token)


async def test_expired_token(company, user):
    token = create_access_token(user.id, company.id, expires_delta=timedelta(seconds=-1))

    with pytest.raises(UnauthorizedError):
        await authenticate(_session_for(company), token)


async def test_inactive_user(company):
    user = UserFactory.inactive(company_id=company.id, hashed_password="unused")
    token = create_access_token(user.id, company.id)

    with (
        patch(f"{ACCESS}.UserRepository", return_value=_users_returning(user)),
        pytest.raises(UnauthorizedError),
    ):
        await authenticate(_session_for(company), token)


async def test_inactive_company(user):
    company = CompanyFactory.inactive(id=user.company_id)
    token = create_access_token(user.id, company.id)

    with (
        patch(f"{ACCESS}.UserRepository", return_value=_users_returning(user)),
        pytest.raises(UnauthorizedError),
    ):
        await authenticate(_session_for(company), token)


async def test_token_for_another_company(company, user):
    token = create_access_token(user.id, uuid4())

    with (
        patch(f"{ACCESS}.UserRepository", return_value=_users_returning(user)),
        pytest.raises(UnauthorizedError),
    ):
        await authenticate(_session_for(company), token)


async def test_require_permission_denies_missing_capability(company):
    viewer = UserFactory.viewer(company_id=company.id, hashed_password="unused")
    token = create_access_token(viewer.id, company.id)

    with (
        patch(f"{ACCESS}.UserRepository", return_value=_users_returning(viewer)),
        pytest.raises(ForbiddenError, match="WRITE on products"),
    ):
        await require_permission(_session_for(company), token, "products", "WRITE")


async def test_require_permission_allows_capability(company, user):
    token = create_access_token(user.id, company.id)

    with patch(f"{ACCESS}.UserRepository", return_value=_users_returning(user)):
        auth = await require_permission(_session_for(company), token, "products", "WRITE")

    assert auth.company_id == company.id
