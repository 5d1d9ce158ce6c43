"""Repository exports."""

from src.accounting.repositories.audit import AuditLogRepository
from src.accounting.repositories.base import BaseRepository
from src.accounting.repositories.investment import ProjectInvestmentRepository
from src.accounting.repositories.product import ProductRepository
from src.accounting.repositories.project import ProjectRepository
from src.accounting.repositories.user import UserRepository

__all__ = [
    "AuditLogRepository",
    "BaseRepository",
    "ProductRepository",
    "ProjectInvestmentRepository",
    "ProjectRepository",
    "UserRepository",
]
