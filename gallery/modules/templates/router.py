"""
Templates Router - FastAPI routes for the templates (tabs) of a dashboard.
"""

from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.exceptions import NotFoundError
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import TemplateService
from .schemas import (
    CreateTemplateDto,
    TemplateDetailResponse,
    TemplateDto,
    TemplateResponse,
    UpdateTemplateDto,
)

router = APIRouter(prefix="/templates", tags=["templates"], route_class=CustomAPIRoute)


@router.get("", response_model=List[TemplateResponse])
async def get_templates_in_dashboard(
    dashboard_id: str = Query(..., description="Owning dashboard"),
    db: AsyncSession = Depends(get_db_util),
):
    return await TemplateService.get_templates_in_dashboard(db, dashboard_id)


@router.get("/{template_id}", response_model=TemplateDetailResponse)
async def get_template_by_id(template_id: str, db: AsyncSession = Depends(get_db_util)):
    """Template with its elements"""
    template = await TemplateService.get_template_by_id(db, template_id)
    if template is None:
        raise NotFoundError("Template", template_id)
    return template


@router.post("", response_model=TemplateResponse)
async def save_template(
    dto: CreateTemplateDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    template = await TemplateService.save_template(db, dto)
    await db.commit()
    return template


@router.put("/dashboard/{dashboard_id}", response_model=bool)
async def update_templates_in_dashboard(
    dashboard_id: str,
    dtos: List[TemplateDto],
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Replace the templates of a dashboard; those left out are deleted"""
    updated = await TemplateService.update_templates_in_dashboard(db, dashboard_id, dtos)
    await db.commit()
    return updated


@router.patch("/{template_id}", response_model=bool)
async def modify_template(
    template_id: str,
    dto: UpdateTemplateDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    modified = await TemplateService.modify_template(db, template_id, dto)
    await db.commit()
    return modified


@router.delete("/{template_id}")
@skip_interceptor
async def delete_template(
    template_id: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    if not await TemplateService.delete_template(db, template_id):
        raise NotFoundError("Template", template_id)
    await db.commit()
    return {"message": "Template deleted successfully"}
