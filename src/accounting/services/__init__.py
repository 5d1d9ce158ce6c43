"""Service layer."""

from src.accounting.services.access import AuthContext, authenticate, require_permission
from src.accounting.services.audit_service import AuditService
from src.accounting.services.auth_service import AuthService
from src.accounting.services.investment_service import (
    InvestmentNotFoundError,
    InvestmentPage,
    InvestmentService,
    ProjectNotFoundError,
)
from src.accounting.services.product_loader import EditAccess, ProductLoad, load_product_for_edit
from src.accounting.services.product_service import (
    ProductCodeConflictError,
    ProductNotFoundError,
    ProductService,
)

__all__ = [
    "AuditService",
    "AuthContext",
    "AuthService",
    "EditAccess",
    "InvestmentNotFoundError",
    "InvestmentPage",
    "InvestmentService",
    "ProductCodeConflictError",
    "ProductLoad",
    "ProductNotFoundError",
    "ProductService",
    "ProjectNotFoundError",
    "authenticate",
    "load_product_for_edit",
    "require_permission",
]
