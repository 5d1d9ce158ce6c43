"""Session authentication and capability checks.

``require_permission`` is the single gate every protected handler goes
through: it resolves the session token to a user of an active company and
checks the user's role against the permission map.
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.exceptions import ForbiddenError, UnauthorizedError
from src.accounting.core.logging import bind_user_context
from src.accounting.core.permissions import Action, Resource, can
from src.accounting.core.security import decode_token
from src.accounting.models import Company
from src.accounting.repositories import UserRepository


@dataclass(frozen=True)
class AuthContext:
    """Who is calling, and for which company."""

    user_id: UUID
    company_id: UUID
    role: str
    email: str


def _parse_uuid(value: object, message: str) -> UUID:
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as e:
        raise UnauthorizedError(message) from e


async def authenticate(session: AsyncSession, token: str | None) -> AuthContext:
    """Resolve a session token to an AuthContext.

    Raises:
        UnauthorizedError: Token missing, invalid or expired; user missing or
            inactive; company missing or inactive.
    """
    if not token:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(token)
    if payload is None or payload.get("type") != "access":
        raise UnauthorizedError("Invalid or expired session")

    user_id = _parse_uuid(payload.get("sub"), "Invalid session payload")
    company_id = _parse_uuid(payload.get("company_id"), "Invalid session payload")

    user = await UserRepository(session).get_by_id(user_id)
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")

    # A user moved to another company must sign in again
    if user.company_id != company_id:
        raise UnauthorizedError("Session does not match user's company")

    company = await session.get(Company, company_id)
    if company is None or not company.is_active:
        raise UnauthorizedError("Company not found or inactive")

    bind_user_context(user.id, company.id, user.email)

    return AuthContext(
        user_id=user.id,
        company_id=company.id,
        role=user.role,
        email=user.email,
    )


async def require_permission(
    session: AsyncSession,
    token: str | None,
    resource: Resource,
    action: Action,
) -> AuthContext:
    """Authenticate and require ``action`` on ``resource``.

    Raises:
        UnauthorizedError: See ``authenticate``.
        ForbiddenError: The user's role lacks the capability.
    """
    auth = await authenticate(session, token)
    if not can(auth.role, resource, action):
        raise ForbiddenError(f"Insufficient permissions: {action} on {resource}")
    return auth
