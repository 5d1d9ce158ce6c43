"""Load a product for the edit page.

The loader keeps three internal outcomes apart (denied, not found,
loaded) so they can be logged, while the page collapses denied and
not-found into plain redirects. A product owned by another company is
reported exactly like a missing one.
"""

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.core.exceptions import ForbiddenError, UnauthorizedError
from src.accounting.core.logging import get_logger
from src.accounting.repositories import ProductRepository
from src.accounting.schemas.product import ProductFormData, normalize_product
from src.accounting.services.access import AuthContext, require_permission

logger = get_logger(__name__)


class EditAccess(str, Enum):
    LOADED = "loaded"
    DENIED = "denied"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ProductLoad:
    outcome: EditAccess
    product: ProductFormData | None = None
    auth: AuthContext | None = None


async def load_product_for_edit(
    session: AsyncSession,
    token: str | None,
    product_id: str,
) -> ProductLoad:
    """Authorize WRITE on products, then fetch the product within the caller's company.

    No product query is issued unless authorization succeeded. Any failure
    of the authorization step, including an unexpected error raised by the
    check itself, yields ``DENIED``.
    """
    try:
        auth = await require_permission(session, token, "products", "WRITE")
    except (UnauthorizedError, ForbiddenError) as e:
        logger.info("product_edit.denied", product_id=product_id, reason=e.message)
        return ProductLoad(EditAccess.DENIED)
    except Exception as e:
        logger.warning(
            "product_edit.denied",
            product_id=product_id,
            reason="authorization check failed",
            exc_info=e,
        )
        return ProductLoad(EditAccess.DENIED)

    product = await ProductRepository(session).get_for_company(product_id, auth.company_id)
    if product is None:
        logger.info("product_edit.not_found", product_id=product_id)
        return ProductLoad(EditAccess.NOT_FOUND, auth=auth)

    logger.debug("product_edit.loaded", product_id=product_id)
    return ProductLoad(EditAccess.LOADED, product=normalize_product(product), auth=auth)
