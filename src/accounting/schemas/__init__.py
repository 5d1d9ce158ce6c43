"""Request and response schemas."""

from src.accounting.schemas.auth import LoginRequest, TokenResponse
from src.accounting.schemas.investment import (
    InvestmentListResponse,
    InvestmentResponse,
    ProjectInvestmentCreate,
    ProjectInvestmentListFilters,
    ProjectInvestmentRead,
    ProjectInvestmentUpdate,
    validate_investment_create,
    validate_investment_filters,
    validate_investment_update,
)
from src.accounting.schemas.pagination import PageInfo, page_info
from src.accounting.schemas.product import (
    ProductFormData,
    ProductRead,
    ProductResponse,
    ProductUpdate,
    normalize_product,
    validate_product_update,
)
from src.accounting.schemas.validation import FieldError, ValidationResult, validate_model

__all__ = [
    # Auth
    "LoginRequest",
    "TokenResponse",
    # Investments
    "InvestmentListResponse",
    "InvestmentResponse",
    "ProjectInvestmentCreate",
    "ProjectInvestmentListFilters",
    "ProjectInvestmentRead",
    "ProjectInvestmentUpdate",
    "validate_investment_create",
    "validate_investment_filters",
    "validate_investment_update",
    # Pagination
    "PageInfo",
    "page_info",
    # Products
    "ProductFormData",
    "ProductRead",
    "ProductResponse",
    "ProductUpdate",
    "normalize_product",
    "validate_product_update",
    # Validation
    "FieldError",
    "ValidationResult",
    "validate_model",
]
