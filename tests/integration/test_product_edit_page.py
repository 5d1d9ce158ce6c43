"""Tests for the product edit page: authorization, tenant scoping and redirects."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.accounting.core.config import get_settings
from src.accounting.core.security import create_access_token
from tests.helpers import login_as

pytestmark = pytest.mark.integration


def edit_url(product_id) -> str:
    return f"/dashboard/products/{product_id}/edit"


async def test_editor_sees_prefilled_form(client: AsyncClient, world):
    login_as(client, world.accountant)

    response = await client.get(edit_url(world.product.id))

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'value="CEM-01"' in response.text
    assert 'value="Cement"' in response.text
    assert 'value="19.999"' in response.text


async def test_without_session_redirects_to_forbidden(client: AsyncClient, world):
    response = await client.get(edit_url(world.product.id))

    assert response.status_code == 303
    assert response.headers["location"] == "/forbidden"


async def test_invalid_session_redirects_to_forbidden(client: AsyncClient, world):
    client.cookies.set("token", "garbage")

    response = await client.get(edit_url(world.product.id))

    assert response.status_code == 303
    assert response.headers["location"] == "/forbidden"


async def test_viewer_redirects_to_forbidden(client: AsyncClient, world):
    """A valid session without WRITE on products never reaches the record."""
    login_as(client, world.viewer)

    response = await client.get(edit_url(world.product.id))

    assert response.status_code == 303
    assert response.headers["location"] == "/forbidden"
    assert "Cement" not in response.text


async def test_foreign_product_looks_like_missing(client: AsyncClient, world):
    """Another company's product and a nonexistent id answer identically."""
    login_as(client, world.accountant)

    foreign = await client.get(edit_url(world.other_product.id))
    missing = await client.get(edit_url(uuid4()))

    assert foreign.status_code == missing.status_code == 303
    assert foreign.headers["location"] == missing.headers["location"] == "/dashboard/products"
    assert foreign.content == missing.content


async def test_malformed_id_redirects_to_list(client: AsyncClient, world):
    login_as(client, world.accountant)

    response = await client.get(edit_url("not-a-uuid"))

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard/products"


async def test_other_company_admin_cannot_edit(client: AsyncClient, world):
    """Even an admin only reaches their own company's products."""
    login_as(client, world.other_user)

    response = await client.get(edit_url(world.product.id))

    assert response.headers["location"] == "/dashboard/products"


async def test_bearer_token_is_accepted(client: AsyncClient, world):
    token = create_access_token(world.accountant.id, world.accountant.company_id)

    response = await client.get(
        edit_url(world.product.id), headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200


async def test_forbidden_page(client: AsyncClient):
    response = await client.get("/forbidden")

    assert response.status_code == 403
    assert "permission" in response.text


async def test_product_list_is_company_scoped(client: AsyncClient, world):
    login_as(client, world.viewer)

    response = await client.get("/dashboard/products")

    assert response.status_code == 200
    assert edit_url(world.product.id) in response.text
    assert edit_url(world.other_product.id) not in response.text


async def test_product_list_requires_session(client: AsyncClient, world):
    response = await client.get("/dashboard/products")

    assert response.status_code == 303
    assert response.headers["location"] == "/forbidden"


async def test_form_submits_to_product_update_endpoint(client: AsyncClient, world):
    login_as(client, world.accountant)

    response = await client.get(edit_url(world.product.id))

    assert f'data-api="/api/v1/products/{world.product.id}"' in response.text
    assert 'data-method="PUT"' in response.text
    assert 'data-return="/dashboard/products"' in response.text


async def test_list_path_setting_drives_links_and_redirects(
    client: AsyncClient, world, monkeypatch
):
    """The cancel link, the save redirect and the not-found redirect share one path."""
    monkeypatch.setattr(get_settings(), "products_list_path", "/books/products")
    login_as(client, world.accountant)

    page = await client.get(edit_url(world.product.id))
    missing = await client.get(edit_url(uuid4()))

    assert '<a href="/books/products">Cancel</a>' in page.text
    assert 'data-return="/books/products"' in page.text
    assert "/dashboard/products" not in page.text
    assert missing.headers["location"] == "/books/products"


async def test_product_list_page_past_the_end(client: AsyncClient, world):
    login_as(client, world.viewer)

    response = await client.get("/dashboard/products", params={"page": str(10**30)})

    assert response.status_code == 200
    assert "No products yet." in response.text
