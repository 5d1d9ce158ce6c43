"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Settings are read on first import; point them at test values before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("METRICS_ENABLED", "false")
# Cheap hashing keeps factory-built users fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator
from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.accounting.core.audit_context import clear_audit_context
from src.accounting.core.config import get_settings
from src.accounting.core.logging import clear_request_context
from src.accounting.models import UserRole
from src.accounting.services.access import AuthContext

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def capturing_logger() -> Generator[CapturingLogger]:
    """Route structlog output into a CapturingLogger for assertions."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


@pytest.fixture(autouse=True)
def _reset_request_context() -> Generator[None]:
    """Keep contextvars from one test out of the next."""
    yield
    clear_request_context()
    clear_audit_context()


@pytest.fixture
def auth_context() -> AuthContext:
    """An accountant of some company, as returned by require_permission."""
    return AuthContext(
        user_id=uuid4(),
        company_id=uuid4(),
        role=UserRole.ACCOUNTANT.value,
        email="accountant@example.com",
    )
