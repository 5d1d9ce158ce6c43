"""Product model - tenant-scoped catalogue entry."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.accounting.models.base import utc_now

# Columns stored as NUMERIC(18, 4); read back as Decimal.
DECIMAL_FIELDS = (
    "default_purchase_price",
    "default_sale_price",
    "opening_stock_qty",
    "opening_stock_unit_cost",
)


class Product(SQLModel, table=True):
    """Product record. Prices and stock quantities are exact decimals."""

    __tablename__ = "products"
    __table_args__ = (UniqueConstraint("company_id", "code", name="uq_products_company_code"),)

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    code: str = Field(max_length=50)
    name: str = Field(max_length=200)
    unit: str = Field(max_length=20)
    category_id: UUID | None = Field(default=None)
    default_purchase_price: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)
    default_sale_price: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)
    image_url: str | None = Field(default=None, max_length=500)
    is_inventory: bool = Field(default=True)
    opening_stock_qty: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)
    opening_stock_unit_cost: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=4)
    inventory_account_id: UUID | None = Field(default=None)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
