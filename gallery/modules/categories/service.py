"""
CategoryService - categories are keyed by name and group dashboards.
"""

import logging
from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import ConflictError
from .models import Category
from .schemas import CategoryDto, UpdateCategoryDto

logger = logging.getLogger(__name__)


class CategoryService:

    @staticmethod
    async def get_all_categories(db: AsyncSession) -> List[Category]:
        result = await db.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    @staticmethod
    async def get_all_categories_with_dashboards(db: AsyncSession) -> List[Category]:
        result = await db.execute(
            select(Category)
            .options(selectinload(Category.dashboards))
            .order_by(Category.name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_category_by_name(db: AsyncSession, name: str) -> Optional[Category]:
        result = await db.execute(
            select(Category)
            .options(selectinload(Category.dashboards))
            .where(Category.name == name)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def save_category(db: AsyncSession, dto: CategoryDto) -> Category:
        """Create a category, or overwrite its description if it exists."""
        category = await save_entity(db, Category, dto, key="name")
        await db.flush()
        await db.refresh(category)
        return category

    @staticmethod
    async def modify_category(
        db: AsyncSession, name: str, dto: UpdateCategoryDto
    ) -> bool:
        category = await db.get(Category, name)
        if category is None:
            return False

        for key, value in dto.model_dump(exclude_unset=True).items():
            setattr(category, key, value)
        await db.flush()
        return True

    @staticmethod
    async def delete_category(db: AsyncSession, name: str) -> int:
        """
        Delete an empty category.

        Returns:
            Number of deleted rows (0 when the category does not exist)

        Raises:
            ConflictError: If dashboards are still filed under the category
        """
        category = await CategoryService.get_category_by_name(db, name)
        if category is None:
            return 0

        if category.dashboards:
            raise ConflictError(
                f"Category '{name}' still holds {len(category.dashboards)} dashboard(s)"
            )

        result = await db.execute(delete(Category).where(Category.name == name))
        logger.info(f"Deleted category {name}")
        return result.rowcount
