"""
Contents Router - paginated contents per element.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, build_paginated_response
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import ContentService
from .schemas import (
    ContentPaginatedResponse,
    ContentResponse,
    CreateContentDto,
    UpdateContentDto,
)

router = APIRouter(prefix="/contents", tags=["contents"], route_class=CustomAPIRoute)


@router.get("", response_model=ContentPaginatedResponse)
async def get_contents_in_element(
    element_id: str = Query(..., description="Owning element"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    db: AsyncSession = Depends(get_db_util),
):
    """Contents of an element, newest first"""
    items, total = await ContentService.get_contents_in_element(db, element_id, page, page_size)
    return build_paginated_response(items, total, page, page_size)


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content_by_id(content_id: str, db: AsyncSession = Depends(get_db_util)):
    return await ContentService.get_content_by_id(db, content_id)


@router.post("", response_model=ContentResponse)
async def save_content(
    dto: CreateContentDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    content = await ContentService.save_content(db, dto)
    await db.commit()
    return content


@router.patch("/{content_id}", response_model=ContentResponse)
async def modify_content(
    content_id: str,
    dto: UpdateContentDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    content = await ContentService.modify_content(db, content_id, dto)
    await db.commit()
    return content


@router.delete("/{content_id}")
@skip_interceptor
async def delete_content(
    content_id: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    await ContentService.delete_content(db, content_id)
    await db.commit()
    return {"message": "Content deleted successfully"}
