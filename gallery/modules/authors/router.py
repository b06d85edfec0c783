"""
Authors Router - FastAPI routes for authors and their dashboard bindings.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.engine import get_db_util
from gallery.core.exceptions import NotFoundError
from gallery.core.response_interceptor import CustomAPIRoute, skip_interceptor
from .auth import AuthService, TokenData, get_current_user
from .service import AuthorService
from .schemas import (
    AuthorDto,
    AuthorResponse,
    AuthorWithDashboardsResponse,
    DashboardIdsDto,
)

router = APIRouter(prefix="/authors", tags=["authors"], route_class=CustomAPIRoute)


@router.get("", response_model=List[AuthorResponse])
async def get_all_authors(db: AsyncSession = Depends(get_db_util)):
    return await AuthorService.get_all_authors(db)


@router.get("/me", response_model=AuthorWithDashboardsResponse)
async def get_current_author(
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Author behind the bearer token, with the dashboards bound to it.
    First call registers the author.
    """
    author = await AuthService.get_user_info(db, current_user)
    await db.commit()
    return author


@router.get("/{email}", response_model=AuthorWithDashboardsResponse)
async def get_author_by_email(email: str, db: AsyncSession = Depends(get_db_util)):
    author = await AuthorService.get_author_by_email(db, email)
    if author is None:
        raise NotFoundError("Author", email)
    return author


@router.post("", response_model=AuthorResponse)
async def save_author(
    dto: AuthorDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    author = await AuthorService.save_author(db, dto)
    await db.commit()
    return author


@router.post("/{email}/dashboards", response_model=AuthorWithDashboardsResponse)
async def bind_dashboards_to_author(
    email: str,
    dto: DashboardIdsDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    author = await AuthorService.bind_dashboards_to_author(db, email, dto.dashboard_ids)
    await db.commit()
    return author


@router.delete("/{email}/dashboards", response_model=AuthorWithDashboardsResponse)
async def unbind_dashboards_from_author(
    email: str,
    dto: DashboardIdsDto,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    author = await AuthorService.unbind_dashboards_from_author(db, email, dto.dashboard_ids)
    await db.commit()
    return author


@router.delete("/{email}")
@skip_interceptor
async def delete_author(
    email: str,
    db: AsyncSession = Depends(get_db_util),
    current_user: TokenData = Depends(get_current_user),
):
    if not await AuthorService.delete_author(db, email):
        raise NotFoundError("Author", email)
    await db.commit()
    return {"message": "Author deleted successfully"}
