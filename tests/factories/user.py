"""User factory for test data generation."""

from polyfactory import Use

from src.accounting.core.security import hash_password
from src.accounting.models import User, UserRole
from tests.factories.base import BaseFactory, generate_uuid, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid)
    company_id = None  # Required FK - must be set explicitly
    email = Use(lambda: f"user_{generate_uuid().hex[-8:]}@example.com")
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    full_name = "Test User"
    role = UserRole.ACCOUNTANT.value
    is_active = True
    created_at = Use(utc_now)

    @classmethod
    def admin(cls, **kwargs):
        """Create an admin."""
        return cls.build(role=UserRole.ADMIN.value, **kwargs)

    @classmethod
    def viewer(cls, **kwargs):
        """Create a read-only user."""
        return cls.build(role=UserRole.VIEWER.value, **kwargs)

    @classmethod
    def inactive(cls, **kwargs):
        """Create an inactive user."""
        return cls.build(is_active=False, **kwargs)
