"""Repository for AuditLog entity."""

from uuid import UUID

from sqlmodel import select

from src.accounting.models import AuditLog
from src.accounting.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLog]):
    model = AuditLog

    async def list_by_entity(self, company_id: UUID, entity_type: str, entity_id: UUID) -> list[AuditLog]:
        """History of one entity, oldest first."""
        result = await self.session.execute(
            select(AuditLog)
            .where(
                AuditLog.company_id == company_id,
                AuditLog.entity_type == entity_type,
                AuditLog.entity_id == entity_id,
            )
            .order_by(AuditLog.created_at)  # type: ignore[arg-type]
        )
        return list(result.scalars().all())
