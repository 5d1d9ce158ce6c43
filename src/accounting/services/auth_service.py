"""Authentication service - password login issuing session tokens."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.exceptions import UnauthorizedError
from src.accounting.core.logging import get_logger
from src.accounting.core.security import create_access_token, verify_password
from src.accounting.models import Company
from src.accounting.repositories import UserRepository

logger = get_logger(__name__)


class AuthService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def login(self, email: str, password: str) -> str:
        """Check credentials and return a session token.

        Raises:
            UnauthorizedError: Unknown email, wrong password, or inactive user/company.
                The message does not say which.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("login.failed", reason="bad_credentials")
            raise UnauthorizedError("Invalid email or password")

        company = await self.session.get(Company, user.company_id)
        if not user.is_active or company is None or not company.is_active:
            logger.info("login.failed", reason="inactive", user_id=str(user.id))
            raise UnauthorizedError("Invalid email or password")

        logger.info("login.succeeded", user_id=str(user.id))
        return create_access_token(user.id, user.company_id)
