"""
Categories Router - FastAPI routes for dashboard categories.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.exceptions import NotFoundError
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import CategoryService
from .schemas import (
    CategoryDto,
    CategoryResponse,
    CategoryWithDashboardsResponse,
    UpdateCategoryDto,
)

router = APIRouter(prefix="/categories", tags=["categories"], route_class=CustomAPIRoute)


@router.get("", response_model=List[CategoryResponse])
async def get_all_categories(db: AsyncSession = Depends(get_db_util)):
    return await CategoryService.get_all_categories(db)


@router.get("/dashboards", response_model=List[CategoryWithDashboardsResponse])
async def get_all_categories_with_dashboards(db: AsyncSession = Depends(get_db_util)):
    """Every category with the dashboards filed under it"""
    return await CategoryService.get_all_categories_with_dashboards(db)


@router.get("/{name}", response_model=CategoryWithDashboardsResponse)
async def get_category_by_name(name: str, db: AsyncSession = Depends(get_db_util)):
    category = await CategoryService.get_category_by_name(db, name)
    if category is None:
        raise NotFoundError("Category", name)
    return category


@router.post("", response_model=CategoryResponse)
async def save_category(
    dto: CategoryDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    category = await CategoryService.save_category(db, dto)
    await db.commit()
    return category


@router.patch("/{name}", response_model=bool)
async def modify_category(
    name: str,
    dto: UpdateCategoryDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    modified = await CategoryService.modify_category(db, name, dto)
    await db.commit()
    return modified


@router.delete("/{name}")
@skip_interceptor
async def delete_category(
    name: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Delete an empty category (409 while it still holds dashboards)"""
    if not await CategoryService.delete_category(db, name):
        raise NotFoundError("Category", name)
    await db.commit()
    return {"message": "Category deleted successfully"}
