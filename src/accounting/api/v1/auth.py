"""Authentication endpoints - password login and logout via the session cookie."""

from fastapi import APIRouter, Response, status

from src.accounting.api.dependencies import DBSession
from src.accounting.core.config import get_settings
from src.accounting.schemas.auth import LoginRequest, TokenResponse
from src.accounting.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    description="Exchange email and password for a session token, also set as a cookie.",
    responses={
        200: {"description": "Logged in"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(request: LoginRequest, response: Response, session: DBSession) -> TokenResponse:
    settings = get_settings()
    token = await AuthService(session).login(request.email, request.password)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.app_env == "production",
        samesite="lax",
    )
    return TokenResponse(access_token=token)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
)
async def logout(response: Response) -> None:
    response.delete_cookie(get_settings().session_cookie_name)
