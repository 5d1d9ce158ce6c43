"""Model exports.

Import from here: `from src.accounting.models import Product, Company`
"""

from src.accounting.models.audit import AuditLog
from src.accounting.models.company import Company
from src.accounting.models.enums import AuditAction, UserRole
from src.accounting.models.investment import ProjectInvestment
from src.accounting.models.product import DECIMAL_FIELDS, Product
from src.accounting.models.project import Project
from src.accounting.models.user import User

__all__ = [
    # Enums
    "AuditAction",
    "UserRole",
    # Models
    "AuditLog",
    "Company",
    "Product",
    "Project",
    "ProjectInvestment",
    "User",
    # Helpers
    "DECIMAL_FIELDS",
]
