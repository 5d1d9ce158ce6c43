"""Audit context middleware - captures request metadata for audit logging."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.accounting.core.audit_context import clear_audit_context, get_client_ip, set_audit_context


async def audit_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Capture client IP, user agent and request id for the audit trail."""
    clear_audit_context()
    set_audit_context(
        ip_address=get_client_ip(
            request.headers.get("x-forwarded-for"),
            request.headers.get("x-real-ip"),
            request.client.host if request.client else None,
        ),
        user_agent=request.headers.get("user-agent"),
        request_id=correlation_id.get(),
    )
    try:
        return await call_next(request)
    finally:
        clear_audit_context()
