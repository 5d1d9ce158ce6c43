"""HTTP middlewares."""

from src.accounting.api.middlewares.audit_context import audit_context_middleware
from src.accounting.api.middlewares.logging_context import logging_context_middleware

__all__ = [
    "audit_context_middleware",
    "logging_context_middleware",
]
