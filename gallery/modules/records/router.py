"""
Records Router - author notes on dashboard elements.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, build_paginated_response
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import RecordService
from .schemas import (
    CreateRecordDto,
    FilterRecordsDto,
    RecordPaginatedResponse,
    RecordResponse,
)

router = APIRouter(prefix="/records", tags=["records"], route_class=CustomAPIRoute)


@router.get("", response_model=RecordPaginatedResponse)
async def get_records(
    dashboard_id: Optional[str] = Query(None),
    template_id: Optional[str] = Query(None),
    element_id: Optional[str] = Query(None),
    author_email: Optional[str] = Query(None),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    db: AsyncSession = Depends(get_db_util),
):
    filters = FilterRecordsDto(
        dashboard_id=dashboard_id,
        template_id=template_id,
        element_id=element_id,
        author_email=author_email,
    )
    items, total = await RecordService.get_records(db, filters, page, page_size)
    return build_paginated_response(items, total, page, page_size)


@router.post("", response_model=RecordResponse)
async def save_record(
    dto: CreateRecordDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Create a record; the author is the bearer of the token"""
    record = await RecordService.save_record(db, current_user, dto)
    await db.commit()
    return record


@router.delete("/{record_id}")
@skip_interceptor
async def delete_record(
    record_id: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    await RecordService.delete_record(db, record_id)
    await db.commit()
    return {"message": "Record deleted successfully"}
