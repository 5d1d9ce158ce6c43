"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

from src.accounting.api.dependencies.auth import (
    ProductsReader,
    ProductsWriter,
    ProjectsReader,
    ProjectsWriter,
    SessionToken,
    get_session_token,
    requires,
)
from src.accounting.api.dependencies.db import DBSession, get_db_session

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "ProductsReader",
    "ProductsWriter",
    "ProjectsReader",
    "ProjectsWriter",
    "SessionToken",
    "get_session_token",
    "requires",
]
