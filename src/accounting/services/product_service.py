"""Product use cases: partial update with a per-company unique code."""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.logging import get_logger
from src.accounting.models import AuditAction, Product
from src.accounting.models.base import utc_now
from src.accounting.repositories import AuditLogRepository, ProductRepository
from src.accounting.schemas.product import ProductRead, ProductUpdate
from src.accounting.services.access import AuthContext
from src.accounting.services.audit_service import AuditService

logger = get_logger(__name__)

ENTITY_TYPE = "Product"


class ProductNotFoundError(Exception):
    """Product is absent or belongs to another company."""


class ProductCodeConflictError(Exception):
    """Another product of the same company already uses the code."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


def _snapshot(product: Product) -> dict[str, Any]:
    return ProductRead.model_validate(product).model_dump(mode="json")


class ProductService:
    """Product operations for one authenticated caller.

    Every lookup is scoped to the caller's company.
    """

    def __init__(self, session: AsyncSession, auth: AuthContext):
        self.session = session
        self.auth = auth
        self.products = ProductRepository(session)
        self.audit = AuditService(AuditLogRepository(session), session, auth.company_id)

    async def update_product(self, product_id: UUID | str, data: ProductUpdate) -> Product:
        """Apply only the fields the caller supplied.

        Raises:
            ProductNotFoundError: The product is not the caller's company's.
            ProductCodeConflictError: The new code is taken within the company.
        """
        product = await self.products.get_for_company(product_id, self.auth.company_id)
        if product is None:
            raise ProductNotFoundError(str(product_id))

        before = _snapshot(product)
        changes = data.model_dump(exclude_unset=True)

        code = changes.get("code", product.code)
        if code != product.code:
            existing = await self.products.get_by_code(self.auth.company_id, code)
            if existing is not None:
                raise ProductCodeConflictError(code)

        for field, value in changes.items():
            setattr(product, field, value)
        product.updated_at = utc_now()

        try:
            await self.session.commit()
            await self.session.refresh(product)
        except IntegrityError as e:
            # Fallback in case of race condition
            await self.session.rollback()
            raise ProductCodeConflictError(code) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "product.updated",
            product_id=str(product.id),
            fields=sorted(changes),
        )
        await self.audit.record(
            AuditAction.UPDATE,
            ENTITY_TYPE,
            product.id,
            actor_user_id=self.auth.user_id,
            before=before,
            after=_snapshot(product),
        )
        return product
