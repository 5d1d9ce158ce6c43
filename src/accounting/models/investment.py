"""Project investment model - money put into a project on a given day."""

import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from src.accounting.models.base import utc_now


class ProjectInvestment(SQLModel, table=True):
    __tablename__ = "project_investments"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_project_investments_amount_positive"),
        Index("ix_project_investments_company_project_date", "company_id", "project_id", "date"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    date: datetime.date
    amount: Decimal = Field(max_digits=18, decimal_places=2)
    note: str | None = Field(default=None, max_length=1000)
    created_by_user_id: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime.datetime = Field(default_factory=utc_now)
    updated_at: datetime.datetime = Field(default_factory=utc_now)
