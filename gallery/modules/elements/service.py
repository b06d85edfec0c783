"""
ElementService - widgets laid out on a template grid.
"""

import logging
from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import ValidationError
from gallery.core.utils import difference_by_id
from gallery.modules.templates.models import Template
from .models import Element
from .schemas import CreateElementDto, ElementDto, UpdateElementDto

logger = logging.getLogger(__name__)


class ElementService:

    @staticmethod
    async def get_elements_in_template(
        db: AsyncSession, template_id: str
    ) -> List[Element]:
        """Elements of a template in grid order (top to bottom, left to right)."""
        result = await db.execute(
            select(Element)
            .where(Element.template_id == template_id)
            .order_by(Element.y, Element.x, Element.name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_element_by_id(
        db: AsyncSession, element_id: str
    ) -> Optional[Element]:
        result = await db.execute(
            select(Element)
            .options(selectinload(Element.contents))
            .where(Element.id == element_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def save_element(db: AsyncSession, dto: CreateElementDto) -> Element:
        element = await save_entity(db, Element, dto)
        await db.flush()
        await db.refresh(element)
        return element

    @staticmethod
    async def modify_element(
        db: AsyncSession, element_id: str, dto: UpdateElementDto
    ) -> bool:
        element = await db.get(Element, element_id)
        if element is None:
            return False

        for key, value in dto.model_dump(exclude_unset=True).items():
            setattr(element, key, value)
        await db.flush()
        return True

    @staticmethod
    async def delete_element(db: AsyncSession, element_id: str) -> int:
        result = await db.execute(delete(Element).where(Element.id == element_id))
        return result.rowcount

    @staticmethod
    async def delete_elements(db: AsyncSession, element_ids: List[str]) -> int:
        if not element_ids:
            return 0
        result = await db.execute(delete(Element).where(Element.id.in_(element_ids)))
        return result.rowcount

    @staticmethod
    async def update_elements_in_template(
        db: AsyncSession, template_id: str, dtos: List[ElementDto]
    ) -> bool:
        """
        Replace the elements of a template with the given list.

        Returns:
            True if the template exists, False otherwise

        Raises:
            ValidationError: If the list repeats an element name
        """
        names = [dto.name for dto in dtos]
        if len(names) != len(set(names)):
            raise ValidationError("Element names must be unique within a template")

        result = await db.execute(
            select(Template)
            .options(selectinload(Template.elements))
            .where(Template.id == template_id)
        )
        template = result.scalar_one_or_none()
        if template is None:
            return False

        elements_remove = difference_by_id(template.elements, dtos)
        await ElementService.delete_elements(db, [e.id for e in elements_remove])

        for dto in dtos:
            await save_entity(db, Element, dto, template_id=template_id)
        await db.flush()

        logger.info(
            f"Template {template_id}: saved {len(dtos)}, removed {len(elements_remove)} element(s)"
        )
        return True
