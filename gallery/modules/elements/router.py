"""
Elements Router - FastAPI routes for the widgets placed on a template.
"""

from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.exceptions import NotFoundError
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from gallery.modules.authors.auth import TokenData, get_current_user
from .service import ElementService
from .schemas import (
    CreateElementDto,
    ElementDto,
    ElementResponse,
    ElementWithContentsResponse,
    UpdateElementDto,
)

router = APIRouter(prefix="/elements", tags=["elements"], route_class=CustomAPIRoute)


@router.get("", response_model=List[ElementResponse])
async def get_elements_in_template(
    template_id: str = Query(..., description="Owning template"),
    db: AsyncSession = Depends(get_db_util),
):
    return await ElementService.get_elements_in_template(db, template_id)


@router.get("/{element_id}", response_model=ElementWithContentsResponse)
async def get_element_by_id(element_id: str, db: AsyncSession = Depends(get_db_util)):
    element = await ElementService.get_element_by_id(db, element_id)
    if element is None:
        raise NotFoundError("Element", element_id)
    return element


@router.post("", response_model=ElementResponse)
async def save_element(
    dto: CreateElementDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    element = await ElementService.save_element(db, dto)
    await db.commit()
    return element


@router.put("/template/{template_id}", response_model=bool)
async def update_elements_in_template(
    template_id: str,
    dtos: List[ElementDto],
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """Replace the elements of a template; those left out are deleted"""
    updated = await ElementService.update_elements_in_template(db, template_id, dtos)
    await db.commit()
    return updated


@router.patch("/{element_id}", response_model=bool)
async def modify_element(
    element_id: str,
    dto: UpdateElementDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    modified = await ElementService.modify_element(db, element_id, dto)
    await db.commit()
    return modified


@router.delete("/{element_id}")
@skip_interceptor
async def delete_element(
    element_id: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    if not await ElementService.delete_element(db, element_id):
        raise NotFoundError("Element", element_id)
    await db.commit()
    return {"message": "Element deleted successfully"}
