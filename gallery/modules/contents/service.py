"""
ContentService - Business logic for element contents.
"""

from typing import List, Tuple
from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import NotFoundError
from gallery.core.pagination import DEFAULT_PAGE_SIZE, paginate_query
from .models import Content
from .schemas import CreateContentDto, UpdateContentDto


class ContentService:

    @staticmethod
    async def get_contents_in_element(
        db: AsyncSession,
        element_id: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Tuple[List[Content], int]:
        """
        Contents of an element, newest `date` first.

        Returns:
            Tuple of (page of contents, total count)
        """
        query = (
            select(Content)
            .where(Content.element_id == element_id)
            .order_by(desc(Content.date), Content.id)
        )
        return await paginate_query(db, query, page, page_size)

    @staticmethod
    async def get_content_by_id(db: AsyncSession, content_id: str) -> Content:
        """
        Raises:
            NotFoundError: If content not found
        """
        content = await db.get(Content, content_id)
        if content is None:
            raise NotFoundError("Content", content_id)
        return content

    @staticmethod
    async def save_content(db: AsyncSession, dto: CreateContentDto) -> Content:
        content = await save_entity(db, Content, dto)
        await db.flush()
        await db.refresh(content)
        return content

    @staticmethod
    async def modify_content(
        db: AsyncSession, content_id: str, dto: UpdateContentDto
    ) -> Content:
        """
        Update only the provided fields.

        Raises:
            NotFoundError: If content not found
        """
        content = await ContentService.get_content_by_id(db, content_id)

        for key, value in dto.model_dump(exclude_unset=True).items():
            setattr(content, key, value)
        await db.flush()
        await db.refresh(content)
        return content

    @staticmethod
    async def delete_content(db: AsyncSession, content_id: str) -> None:
        """
        Raises:
            NotFoundError: If content not found
        """
        result = await db.execute(delete(Content).where(Content.id == content_id))
        if not result.rowcount:
            raise NotFoundError("Content", content_id)
