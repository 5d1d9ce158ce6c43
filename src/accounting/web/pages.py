"""Server-rendered dashboard pages.

Pages never answer with an error body: a caller who may not see a page is
redirected to the forbidden page, and a record that is missing (or owned
by another company) sends the caller back to the list.
"""

from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from src.accounting.api.dependencies import DBSession, SessionToken
from src.accounting.core.config import get_settings
from src.accounting.core.exceptions import ForbiddenError, PageRedirect, UnauthorizedError
from src.accounting.core.permissions import Action, Resource
from src.accounting.repositories import ProductRepository
from src.accounting.schemas.pagination import DEFAULT_PAGE_SIZE, page_info
from src.accounting.services.access import AuthContext, require_permission
from src.accounting.services.product_loader import EditAccess, load_product_for_edit

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

router = APIRouter(include_in_schema=False)


def render(
    request: Request,
    name: str,
    context: dict[str, Any],
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    """Render a page template with the shared navigation paths."""
    context = {"products_list_path": get_settings().products_list_path, **context}
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def redirect_for(outcome: EditAccess) -> str:
    """Where a non-loaded outcome sends the caller."""
    settings = get_settings()
    if outcome is EditAccess.DENIED:
        return settings.forbidden_path
    return settings.products_list_path


async def authorize_page(
    session: AsyncSession,
    token: str | None,
    resource: Resource,
    action: Action,
) -> AuthContext:
    """require_permission for pages: any denial becomes a redirect to the forbidden page."""
    try:
        return await require_permission(session, token, resource, action)
    except (UnauthorizedError, ForbiddenError) as e:
        raise PageRedirect(get_settings().forbidden_path) from e


@router.get("/forbidden", response_class=HTMLResponse)
async def forbidden(request: Request) -> HTMLResponse:
    return render(
        request,
        "forbidden.html",
        {"title": "Forbidden"},
        status_code=status.HTTP_403_FORBIDDEN,
    )


@router.get("/dashboard/products", response_class=HTMLResponse)
async def products_page(
    request: Request,
    session: DBSession,
    token: SessionToken,
    page: Annotated[int, Query(ge=1)] = 1,
    search: Annotated[str | None, Query(max_length=100)] = None,
) -> HTMLResponse:
    auth = await authorize_page(session, token, "products", "READ")
    products, total = await ProductRepository(session).list_for_company(
        auth.company_id, page=page, page_size=DEFAULT_PAGE_SIZE, search=search
    )
    return render(
        request,
        "products/list.html",
        {
            "title": "Products",
            "products": products,
            "pagination": page_info(page, DEFAULT_PAGE_SIZE, total),
            "search": search or "",
        },
    )


@router.get("/dashboard/products/{product_id}/edit", response_class=HTMLResponse)
async def edit_product_page(
    product_id: str,
    request: Request,
    session: DBSession,
    token: SessionToken,
) -> HTMLResponse:
    load = await load_product_for_edit(session, token, product_id)
    if load.outcome is not EditAccess.LOADED:
        raise PageRedirect(redirect_for(load.outcome))

    return render(
        request,
        "products/edit.html",
        {"title": "Edit Product", "product": load.product},
    )
