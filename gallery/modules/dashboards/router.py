"""
Dashboards Router - FastAPI routes for dashboards.
Reads are public; every write requires a bearer token.
"""

from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.exceptions import NotFoundError
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import DashboardService
from .schemas import (
    DashboardDto,
    DashboardFullResponse,
    DashboardResponse,
    DashboardTemplateResponse,
    DashboardWithCategoryResponse,
    DeleteResult,
    ModifyDashboardDto,
)

router = APIRouter(prefix="/dashboards", tags=["dashboards"], route_class=CustomAPIRoute)


@router.get("", response_model=List[DashboardFullResponse])
async def get_all_dashboards(db: AsyncSession = Depends(get_db_util)):
    """All dashboards with category, templates, elements and contents"""
    return await DashboardService.get_all_dashboards(db)


@router.get("/templates", response_model=List[DashboardTemplateResponse])
async def get_all_dashboards_template(db: AsyncSession = Depends(get_db_util)):
    """All dashboards with their category and templates"""
    return await DashboardService.get_all_dashboards_template(db)


@router.get("/search", response_model=List[DashboardWithCategoryResponse])
async def search_dashboards(
    keyword: str = Query(..., min_length=1, description="Part of the dashboard name"),
    db: AsyncSession = Depends(get_db_util),
):
    return await DashboardService.search_dashboards(db, keyword)


@router.get("/{dashboard_id}", response_model=DashboardFullResponse)
async def get_dashboard_by_id(dashboard_id: str, db: AsyncSession = Depends(get_db_util)):
    dashboard = await DashboardService.get_dashboard_by_id(db, dashboard_id)
    if dashboard is None:
        raise NotFoundError("Dashboard", dashboard_id)
    return dashboard


@router.get("/{dashboard_id}/category-and-templates", response_model=DashboardTemplateResponse)
async def get_dashboard_category_and_template(
    dashboard_id: str, db: AsyncSession = Depends(get_db_util)
):
    dashboard = await DashboardService.get_dashboard_category_and_template(db, dashboard_id)
    if dashboard is None:
        raise NotFoundError("Dashboard", dashboard_id)
    return dashboard


@router.post("", response_model=DashboardResponse)
async def save_dashboard(
    dto: DashboardDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Create a dashboard, or overwrite it when `id` is given"""
    dashboard = await DashboardService.save_dashboard(db, dto)
    await db.commit()
    return dashboard


@router.post("/bulk", response_model=List[DashboardResponse])
async def save_dashboards(
    dtos: List[DashboardDto],
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    dashboards = await DashboardService.save_dashboards(db, dtos)
    await db.commit()
    return dashboards


@router.patch("/{dashboard_id}", response_model=bool)
async def modify_dashboard(
    dashboard_id: str,
    dto: ModifyDashboardDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Rename/redescribe a dashboard. Returns false when it does not exist."""
    modified = await DashboardService.modify_dashboard(db, dashboard_id, dto)
    await db.commit()
    return modified


@router.delete("", response_model=DeleteResult)
@skip_interceptor
async def delete_dashboards(
    ids: List[str] = Query(..., description="Dashboard ids: ?ids=a&ids=b"),
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    affected = await DashboardService.delete_dashboards(db, ids)
    await db.commit()
    return DeleteResult(message="Dashboards deleted successfully", affected=affected)


@router.delete("/{dashboard_id}", response_model=DeleteResult)
@skip_interceptor
async def delete_dashboard(
    dashboard_id: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    affected = await DashboardService.delete_dashboard(db, dashboard_id)
    if not affected:
        raise NotFoundError("Dashboard", dashboard_id)
    await db.commit()
    return DeleteResult(message="Dashboard deleted successfully", affected=affected)


# ------------------------------------------------------------------------------
# Category scoped


@router.post("/category/{category_name}", response_model=bool)
async def new_dashboard_attach_to_category(
    category_name: str,
    dto: DashboardDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Create a dashboard in a category. Returns false when the category does not exist."""
    attached = await DashboardService.new_dashboard_attach_to_category(db, category_name, dto)
    await db.commit()
    return attached


@router.put("/category/{category_name}", response_model=bool)
async def update_dashboards_in_category(
    category_name: str,
    dtos: List[DashboardDto],
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Replace the dashboards of a category.
    Dashboards left out are deleted; the saved ones are bound to the caller.
    """
    updated = await DashboardService.update_dashboards_in_category(
        db, current_user, category_name, dtos
    )
    await db.commit()
    return updated


@router.delete("/category/{category_name}/{dashboard_name}", response_model=DeleteResult)
@skip_interceptor
async def delete_dashboard_in_category(
    category_name: str,
    dashboard_name: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    affected = await DashboardService.delete_dashboard_in_category(
        db, category_name, dashboard_name
    )
    await db.commit()
    return DeleteResult(message="Dashboard deleted successfully", affected=affected)
