"""Pagination schemas for page-number pagination."""

import math

from pydantic import BaseModel, Field

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100


class PageInfo(BaseModel):
    """Position of the current page within a filtered result set."""

    page: int = Field(description="1-based page number")
    page_size: int
    total: int = Field(description="Number of rows matching the filters")
    total_pages: int


def page_info(page: int, page_size: int, total: int) -> PageInfo:
    """Build PageInfo; ``total_pages`` is ``ceil(total / page_size)``."""
    return PageInfo(
        page=page,
        page_size=page_size,
        total=total,
        total_pages=math.ceil(total / page_size) if page_size else 0,
    )
