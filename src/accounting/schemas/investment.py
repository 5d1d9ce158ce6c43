"""Project investment schemas for API request/response.

Inputs are accepted under their camelCase wire names (``projectId``,
``dateFrom``, ``pageSize``) as well as the Python field names.
"""

import datetime
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.accounting.core.validators import blank_to_none, coerce_utc_date
from src.accounting.schemas.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PageInfo
from src.accounting.schemas.validation import ValidationResult, validate_model

# Amounts are stored as NUMERIC(18, 2)
CENT = Decimal("0.01")
AMOUNT_INTEGER_DIGITS = 16
AMOUNT_NOT_POSITIVE = "Amount must be positive"

_input_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _require_project(v: str) -> str:
    if not v:
        raise ValueError("Project is required")
    return v


def _require_positive(v: Decimal) -> Decimal:
    """Round to cents, half up. The rounded amount must still be positive."""
    if v <= 0:
        raise ValueError(AMOUNT_NOT_POSITIVE)
    if v.adjusted() >= AMOUNT_INTEGER_DIGITS:
        raise ValueError("Amount is too large")
    v = v.quantize(CENT, rounding=ROUND_HALF_UP)
    if v <= 0:
        raise ValueError(AMOUNT_NOT_POSITIVE)
    return v


class ProjectInvestmentCreate(BaseModel):
    """Schema for creating a project investment."""

    model_config = _input_config

    project_id: str
    date: datetime.date
    amount: Decimal
    note: str | None = None

    @field_validator("project_id")
    @classmethod
    def validate_project_id(cls, v: str) -> str:
        return _require_project(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> datetime.date:
        return coerce_utc_date(v)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        return _require_positive(v)


class ProjectInvestmentUpdate(BaseModel):
    """Schema for updating a project investment.

    Every field is optional; ``model_dump(exclude_unset=True)`` yields
    exactly the fields the caller sent.
    """

    model_config = _input_config

    project_id: str | None = None
    date: datetime.date | None = None
    amount: Decimal | None = None
    note: str | None = None

    @field_validator("project_id")
    @classmethod
    def validate_project_id(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Project is required")
        return _require_project(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> datetime.date:
        return coerce_utc_date(v)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal | None) -> Decimal:
        if v is None:
            raise ValueError(AMOUNT_NOT_POSITIVE)
        return _require_positive(v)


class ProjectInvestmentListFilters(BaseModel):
    """Schema for filtering the investments list.

    Blank or null query values count as absent, so ``page`` and
    ``pageSize`` fall back to their defaults.
    """

    model_config = _input_config

    project_id: str | None = None
    date_from: datetime.date | None = None
    date_to: datetime.date | None = None
    page: int = Field(default=1, gt=0)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, le=MAX_PAGE_SIZE)

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if blank_to_none(value) is not None}
        return data

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def coerce_dates(cls, v: Any) -> datetime.date:
        return coerce_utc_date(v)


def validate_investment_create(data: Any) -> ValidationResult[ProjectInvestmentCreate]:
    return validate_model(ProjectInvestmentCreate, data)


def validate_investment_update(data: Any) -> ValidationResult[ProjectInvestmentUpdate]:
    return validate_model(ProjectInvestmentUpdate, data)


def validate_investment_filters(data: Any) -> ValidationResult[ProjectInvestmentListFilters]:
    return validate_model(ProjectInvestmentListFilters, data)


class ProjectRef(BaseModel):
    id: UUID
    name: str

    model_config = {"from_attributes": True}


class ProjectInvestmentRead(BaseModel):
    """Schema for reading a project investment."""

    id: UUID
    project_id: UUID
    date: datetime.date
    amount: Decimal
    note: str | None
    created_by_user_id: UUID | None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class InvestmentTotals(BaseModel):
    total: Decimal


class InvestmentListResponse(BaseModel):
    ok: bool = True
    project: ProjectRef
    data: list[ProjectInvestmentRead]
    pagination: PageInfo
    totals: InvestmentTotals


class InvestmentResponse(BaseModel):
    ok: bool = True
    data: ProjectInvestmentRead
