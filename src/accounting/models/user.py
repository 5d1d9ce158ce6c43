"""User model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.accounting.models.base import utc_now
from src.accounting.models.enums import UserRole


class User(SQLModel, table=True):
    """A login belonging to exactly one company."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", index=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    full_name: str = Field(max_length=100)
    role: str = Field(default=UserRole.VIEWER.value, max_length=20)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> UserRole:
        """Get role as UserRole enum."""
        return UserRole(self.role)
