"""Audit log model for tracking changes to company data."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Index
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.accounting.models.base import utc_now

_JSON = JSON().with_variant(JSONB(), "postgresql")


class AuditLog(SQLModel, table=True):
    """One row per create/update/delete of a company-owned entity."""

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_company_created", "company_id", "created_at"),
        Index("ix_audit_logs_entity", "entity_type", "entity_id"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    # Context
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    actor_user_id: UUID | None = Field(default=None, foreign_key="users.id")

    # Action details
    entity_type: str = Field(max_length=50)  # "Product", "ProjectInvestment", ...
    entity_id: UUID
    action: str = Field(max_length=20)  # AuditAction value

    # Snapshots
    before: dict[str, Any] | None = Field(default=None, sa_column=Column(_JSON, nullable=True))
    after: dict[str, Any] | None = Field(default=None, sa_column=Column(_JSON, nullable=True))

    # Request metadata
    ip_address: str | None = Field(max_length=45, default=None)
    user_agent: str | None = Field(max_length=500, default=None)
    request_id: str | None = Field(max_length=36, default=None)

    created_at: datetime = Field(default_factory=utc_now)
