"""Audit logging service - records who changed what, with before/after snapshots."""

import contextlib
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.audit_context import get_audit_context
from src.accounting.core.logging import get_logger
from src.accounting.models import AuditAction, AuditLog
from src.accounting.repositories import AuditLogRepository

logger = get_logger(__name__)


class AuditService:
    """Service for recording audit logs.

    Fire-and-forget design: logging failures should not block business operations.
    Call it after the business change has been committed.
    """

    def __init__(
        self,
        audit_repo: AuditLogRepository,
        session: AsyncSession,
        company_id: UUID,
    ):
        self.audit_repo = audit_repo
        self.session = session
        self.company_id = company_id

    async def record(
        self,
        action: AuditAction,
        entity_type: str,
        entity_id: UUID,
        actor_user_id: UUID | None = None,
        before: dict[str, Any] | None = None,
        after: dict[str, Any] | None = None,
    ) -> AuditLog | None:
        """Record an audit log entry.

        Request metadata (IP, user agent, request_id) comes from the audit
        context. Failures are logged but do not raise.

        Returns:
            The created AuditLog, or None if logging failed
        """
        try:
            ctx = get_audit_context()
            audit_log = AuditLog(
                company_id=self.company_id,
                actor_user_id=actor_user_id,
                entity_type=entity_type,
                entity_id=entity_id,
                action=action.value,
                before=before,
                after=after,
                ip_address=ctx.ip_address if ctx else None,
                user_agent=ctx.user_agent if ctx else None,
                request_id=ctx.request_id if ctx else None,
            )

            self.audit_repo.add(audit_log)
            await self.session.commit()

            logger.debug(
                "Audit log recorded",
                action=audit_log.action,
                entity_type=entity_type,
                entity_id=str(entity_id),
            )
            return audit_log

        except Exception as e:
            logger.warning(
                "Failed to record audit log",
                action=action.value,
                entity_type=entity_type,
                error=str(e),
            )
            with contextlib.suppress(Exception):
                await self.session.rollback()
            return None
