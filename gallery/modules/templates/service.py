"""
TemplateService - ordered tabs of a dashboard.
"""

import logging
from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import ValidationError
from gallery.core.utils import difference_by_id
from gallery.modules.dashboards.models import Dashboard
from .models import Template
from .schemas import CreateTemplateDto, TemplateDto, UpdateTemplateDto

logger = logging.getLogger(__name__)


class TemplateService:
    """
    Template service.
    Templates are always ordered by `index` within their dashboard.
    """

    @staticmethod
    async def get_templates_in_dashboard(
        db: AsyncSession, dashboard_id: str
    ) -> List[Template]:
        result = await db.execute(
            select(Template)
            .where(Template.dashboard_id == dashboard_id)
            .order_by(Template.index, Template.name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_template_by_id(
        db: AsyncSession, template_id: str
    ) -> Optional[Template]:
        """Find a template with its elements, or None."""
        result = await db.execute(
            select(Template)
            .options(selectinload(Template.elements))
            .where(Template.id == template_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def save_template(db: AsyncSession, dto: CreateTemplateDto) -> Template:
        """
        Create a template, or overwrite the given fields when `id` exists.
        """
        template = await save_entity(db, Template, dto)
        await db.flush()
        await db.refresh(template)
        return template

    @staticmethod
    async def modify_template(
        db: AsyncSession, template_id: str, dto: UpdateTemplateDto
    ) -> bool:
        template = await db.get(Template, template_id)
        if template is None:
            return False

        for key, value in dto.model_dump(exclude_unset=True).items():
            setattr(template, key, value)
        await db.flush()
        return True

    @staticmethod
    async def delete_template(db: AsyncSession, template_id: str) -> int:
        result = await db.execute(delete(Template).where(Template.id == template_id))
        return result.rowcount

    @staticmethod
    async def delete_templates(db: AsyncSession, template_ids: List[str]) -> int:
        if not template_ids:
            return 0
        result = await db.execute(delete(Template).where(Template.id.in_(template_ids)))
        return result.rowcount

    @staticmethod
    async def update_templates_in_dashboard(
        db: AsyncSession, dashboard_id: str, dtos: List[TemplateDto]
    ) -> bool:
        """
        Replace the templates of a dashboard with the given list.

        Templates missing from the list are deleted (with their elements),
        the others are created or updated in place.

        Returns:
            True if the dashboard exists, False otherwise

        Raises:
            ValidationError: If the list repeats a template name
        """
        names = [dto.name for dto in dtos]
        if len(names) != len(set(names)):
            raise ValidationError("Template names must be unique within a dashboard")

        result = await db.execute(
            select(Dashboard)
            .options(selectinload(Dashboard.templates))
            .where(Dashboard.id == dashboard_id)
        )
        dashboard = result.scalar_one_or_none()
        if dashboard is None:
            return False

        templates_remove = difference_by_id(dashboard.templates, dtos)
        await TemplateService.delete_templates(db, [t.id for t in templates_remove])

        for dto in dtos:
            await save_entity(db, Template, dto, dashboard_id=dashboard_id)
        await db.flush()

        logger.info(
            f"Dashboard {dashboard_id}: saved {len(dtos)}, removed {len(templates_remove)} template(s)"
        )
        return True
