"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """User role within a company."""

    ADMIN = "ADMIN"
    ACCOUNTANT = "ACCOUNTANT"
    ENGINEER = "ENGINEER"
    DATA_ENTRY = "DATA_ENTRY"
    VIEWER = "VIEWER"


class AuditAction(str, Enum):
    """Audit action types for type-safe logging."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
