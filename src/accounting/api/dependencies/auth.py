"""Authentication and authorization dependencies."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, Request

from src.accounting.api.dependencies.db import DBSession
from src.accounting.core.config import get_settings
from src.accounting.core.permissions import Action, Resource
from src.accounting.services.access import AuthContext, require_permission


def get_session_token(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Session token from the session cookie, else from a Bearer header."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:]
    return None


SessionToken = Annotated[str | None, Depends(get_session_token)]


def requires(resource: Resource, action: Action) -> Callable[..., Awaitable[AuthContext]]:
    """Build a dependency that enforces ``action`` on ``resource``.

    UnauthorizedError / ForbiddenError propagate to the app's exception
    handlers (401 / 403).
    """

    async def dependency(session: DBSession, token: SessionToken) -> AuthContext:
        return await require_permission(session, token, resource, action)

    dependency.__name__ = f"require_{resource}_{action.lower()}"
    return dependency


ProjectsReader = Annotated[AuthContext, Depends(requires("projects", "READ"))]
ProjectsWriter = Annotated[AuthContext, Depends(requires("projects", "WRITE"))]
ProductsReader = Annotated[AuthContext, Depends(requires("products", "READ"))]
ProductsWriter = Annotated[AuthContext, Depends(requires("products", "WRITE"))]
