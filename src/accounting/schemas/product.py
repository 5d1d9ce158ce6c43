"""Product schemas: API read and update models, and the edit-form presentation model."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from src.accounting.core.validators import blank_to_none
from src.accounting.models.product import DECIMAL_FIELDS, Product
from src.accounting.schemas.validation import ValidationResult, validate_model

# Decimal columns are NUMERIC(18, 4)
_QUANTUM = Decimal("0.0001")
_INTEGER_DIGITS = 14

_REQUIRED_MESSAGES = {
    "code": "Product code is required",
    "name": "Product name is required",
    "unit": "Unit is required",
    "is_inventory": "Inventory flag is required",
    "is_active": "Active flag is required",
}

_NON_NEGATIVE_MESSAGES = {
    "default_purchase_price": "Purchase price must be non-negative",
    "default_sale_price": "Sale price must be non-negative",
    "opening_stock_qty": "Opening stock quantity must be non-negative",
    "opening_stock_unit_cost": "Opening stock unit cost must be non-negative",
}

_http_url = TypeAdapter(HttpUrl)


class ProductRead(BaseModel):
    """Schema for reading a product. Decimals stay exact."""

    id: UUID
    company_id: UUID
    code: str
    name: str
    unit: str
    category_id: UUID | None
    default_purchase_price: Decimal
    default_sale_price: Decimal
    image_url: str | None
    is_inventory: bool
    opening_stock_qty: Decimal
    opening_stock_unit_cost: Decimal
    inventory_account_id: UUID | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    Every field is optional; ``model_dump(exclude_unset=True)`` yields
    exactly the fields the caller sent. Prices and quantities stay exact
    decimals, rounded half up to the column scale.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str | None = Field(default=None, max_length=50)
    name: str | None = Field(default=None, max_length=200)
    unit: str | None = Field(default=None, max_length=20)
    category_id: UUID | None = None
    default_purchase_price: Decimal | None = None
    default_sale_price: Decimal | None = None
    image_url: str | None = Field(default=None, max_length=500)
    is_inventory: bool | None = None
    opening_stock_qty: Decimal | None = None
    opening_stock_unit_cost: Decimal | None = None
    inventory_account_id: UUID | None = None
    is_active: bool | None = None

    @field_validator("category_id", "image_url", "inventory_account_id", mode="before")
    @classmethod
    def blank_is_null(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator("code", "name", "unit", "is_inventory", "is_active")
    @classmethod
    def require_value(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, str):
            v = v.strip()
        if v is None or v == "":
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator(*_NON_NEGATIVE_MESSAGES)
    @classmethod
    def validate_decimal(cls, v: Decimal | None, info: ValidationInfo) -> Decimal:
        if v is None or v < 0:
            raise ValueError(_NON_NEGATIVE_MESSAGES[info.field_name])
        if v.adjusted() >= _INTEGER_DIGITS:
            raise ValueError("Value is too large")
        return v.quantize(_QUANTUM, rounding=ROUND_HALF_UP)

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        try:
            _http_url.validate_python(v)
        except ValidationError as e:
            raise ValueError("Image URL must be a valid URL") from e
        return v


def validate_product_update(data: Any) -> ValidationResult[ProductUpdate]:
    return validate_model(ProductUpdate, data)


class ProductFormData(BaseModel):
    """Product as handed to the edit form.

    Prices and quantities are floats here because the form works in plain
    numbers. This model is display-only; writes go through the exact
    decimal columns.
    """

    id: UUID
    company_id: UUID
    code: str
    name: str
    unit: str
    category_id: UUID | None
    default_purchase_price: float
    default_sale_price: float
    image_url: str | None
    is_inventory: bool
    opening_stock_qty: float
    opening_stock_unit_cost: float
    inventory_account_id: UUID | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"frozen": True}


def normalize_product(product: Product) -> ProductFormData:
    """Convert a stored product into its form representation.

    Every decimal column becomes a float; other fields are copied as-is.
    """
    data = {name: getattr(product, name) for name in ProductFormData.model_fields}
    for name in DECIMAL_FIELDS:
        data[name] = float(Decimal(data[name]))
    return ProductFormData(**data)


class ProductResponse(BaseModel):
    ok: bool = True
    data: ProductRead
