"""Repository for Product entity (company-scoped)."""

from uuid import UUID

from sqlmodel import select

from src.accounting.models import Product
from src.accounting.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for Product entity."""

    model = Product

    async def list_for_company(
        self,
        company_id: UUID,
        page: int = 1,
        page_size: int = 25,
        search: str | None = None,
    ) -> tuple[list[Product], int]:
        """List a company's products ordered by code."""
        query = select(Product).where(Product.company_id == company_id)
        if search:
            pattern = f"%{search}%"
            query = query.where(Product.name.ilike(pattern) | Product.code.ilike(pattern))  # type: ignore[attr-defined]
        return await self.paginate(query, page, page_size, (Product.code, Product.id))

    async def get_by_code(self, company_id: UUID, code: str) -> Product | None:
        """Get product by its per-company code."""
        result = await self.session.execute(
            select(Product).where(Product.company_id == company_id, Product.code == code)
        )
        return result.scalar_one_or_none()
