"""Company model - the tenant boundary."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.accounting.models.base import utc_now


class Company(SQLModel, table=True):
    """A company owns every tenant-scoped row through ``company_id``."""

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200, index=True)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
