"""
Pagination utilities shared by list endpoints.

Works with the immutable query builder pattern used throughout the services:
callers build a fully filtered and ordered Select, then hand it over here.
"""

from typing import Tuple, List, Any
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.selectable import Select

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 200


async def paginate_query(
    db: AsyncSession,
    query: Select,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Tuple[List[Any], int]:
    """
    Apply offset-based pagination to a SQLAlchemy query.

    The query should already carry its WHERE clauses, eager loading
    options and ORDER BY.

    Args:
        db: Async SQLAlchemy session
        query: Base query with filters and ordering already applied
        page: Page number (1-indexed)
        page_size: Items per page

    Returns:
        Tuple of (paginated_items, total_count)
    """
    # Count over a subquery so joins and filters are preserved
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await db.execute(count_query)).scalar() or 0

    offset = (page - 1) * page_size
    result = await db.execute(query.offset(offset).limit(page_size))
    items = list(result.scalars().all())

    return items, total


def build_paginated_response(
    items: List[Any],
    total: int,
    page: int,
    page_size: int,
) -> dict:
    """
    Build a standardized paginated response dictionary.

    Returns:
        Dict with keys: items, total, page, page_size, total_pages, has_more
    """
    total_pages = (total + page_size - 1) // page_size if total > 0 else 0

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "has_more": page < total_pages,
    }
