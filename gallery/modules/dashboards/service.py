"""
DashboardService - business logic over the async session.

Dashboards are read with one of three relation presets and written with
create-or-update semantics. Category-scoped operations resolve the category
first and report a missing one by returning False.
"""

import logging
from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import ValidationError
from gallery.core.utils import difference_by_id, like_pattern
from gallery.modules.authors.auth import AuthService, TokenData
from gallery.modules.authors.service import AuthorService
from gallery.modules.categories.models import Category
from gallery.modules.elements.models import Element
from gallery.modules.templates.models import Template
from .models import Dashboard
from .schemas import DashboardDto, ModifyDashboardDto

logger = logging.getLogger(__name__)


# category, templates, templates.elements, templates.elements.contents
DASHBOARD_FULL_RELATIONS = (
    selectinload(Dashboard.category),
    selectinload(Dashboard.templates)
    .selectinload(Template.elements)
    .selectinload(Element.contents),
)

DASHBOARD_TEMPLATE_RELATIONS = (
    selectinload(Dashboard.category),
    selectinload(Dashboard.templates),
)

DASHBOARD_CATEGORY_RELATIONS = (selectinload(Dashboard.category),)


class DashboardService:
    """
    Dashboard service.
    Methods flush but never commit; the request dependency owns the transaction.
    """

    @staticmethod
    async def get_all_dashboards(db: AsyncSession) -> List[Dashboard]:
        result = await db.execute(
            select(Dashboard)
            .options(*DASHBOARD_FULL_RELATIONS)
            .order_by(Dashboard.category_name, Dashboard.name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_dashboard_by_id(
        db: AsyncSession, dashboard_id: str
    ) -> Optional[Dashboard]:
        result = await db.execute(
            select(Dashboard)
            .options(*DASHBOARD_FULL_RELATIONS)
            .where(Dashboard.id == dashboard_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def _upsert(
        db: AsyncSession, dto: DashboardDto, category_name: Optional[str] = None
    ) -> Dashboard:
        overrides = {"category_name": category_name} if category_name else {}

        existing = await db.get(Dashboard, dto.id) if dto.id else None
        if existing is None and not (category_name or dto.category_name):
            raise ValidationError(f"Dashboard '{dto.name}' requires a category")
        if (
            existing is not None
            and not category_name
            and "category_name" in dto.model_fields_set
            and not dto.category_name
        ):
            raise ValidationError(f"Dashboard '{dto.name}' cannot leave its category")

        return await save_entity(db, Dashboard, dto, **overrides)

    @staticmethod
    async def save_dashboard(db: AsyncSession, dto: DashboardDto) -> Dashboard:
        """
        Create a dashboard, or overwrite the given fields when `id` exists.

        Raises:
            ValidationError: If a new dashboard has no category
        """
        dashboard = await DashboardService._upsert(db, dto)
        await db.flush()
        await db.refresh(dashboard)
        return dashboard

    @staticmethod
    async def delete_dashboard(db: AsyncSession, dashboard_id: str) -> int:
        """Delete a dashboard; templates, elements, contents, records and author bindings cascade."""
        result = await db.execute(delete(Dashboard).where(Dashboard.id == dashboard_id))
        if result.rowcount:
            logger.info(f"Deleted dashboard {dashboard_id}")
        return result.rowcount

    # ------------------------------------------------------------------------------

    @staticmethod
    async def get_all_dashboards_template(db: AsyncSession) -> List[Dashboard]:
        result = await db.execute(
            select(Dashboard)
            .options(*DASHBOARD_TEMPLATE_RELATIONS)
            .order_by(Dashboard.category_name, Dashboard.name)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_dashboard_category_and_template(
        db: AsyncSession, dashboard_id: str
    ) -> Optional[Dashboard]:
        result = await db.execute(
            select(Dashboard)
            .options(*DASHBOARD_TEMPLATE_RELATIONS)
            .where(Dashboard.id == dashboard_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def modify_dashboard(
        db: AsyncSession, dashboard_id: Optional[str], dto: ModifyDashboardDto
    ) -> bool:
        """
        Overwrite name and description of an existing dashboard.
        Other fields and relations are left untouched.

        Returns:
            True if the dashboard exists and was updated, False otherwise
        """
        if not dashboard_id:
            return False

        dashboard = await db.get(Dashboard, dashboard_id)
        if dashboard is None:
            return False

        dashboard.name = dto.name
        dashboard.description = dto.description
        await db.flush()
        return True

    @staticmethod
    async def new_dashboard_attach_to_category(
        db: AsyncSession, category_name: str, dto: DashboardDto
    ) -> bool:
        """
        Create a dashboard under an existing category.

        Returns:
            True if the category exists and the dashboard was saved, False otherwise
        """
        category = await db.get(Category, category_name)
        if category is None:
            return False

        await DashboardService._upsert(db, dto, category_name=category_name)
        await db.flush()
        return True

    @staticmethod
    async def delete_dashboard_in_category(
        db: AsyncSession, category_name: str, dashboard_name: str
    ) -> int:
        result = await db.execute(
            delete(Dashboard).where(
                Dashboard.category_name == category_name,
                Dashboard.name == dashboard_name,
            )
        )
        return result.rowcount

    @staticmethod
    async def save_dashboards(
        db: AsyncSession,
        dtos: List[DashboardDto],
        category_name: Optional[str] = None,
    ) -> List[Dashboard]:
        """
        Bulk create-or-update.

        Args:
            dtos: Dashboards to save
            category_name: When given, every dashboard is filed under it

        Returns:
            Saved dashboards in input order, ids assigned
        """
        dashboards = [
            await DashboardService._upsert(db, dto, category_name=category_name)
            for dto in dtos
        ]
        await db.flush()
        return dashboards

    @staticmethod
    async def delete_dashboards(db: AsyncSession, dashboard_ids: List[str]) -> int:
        if not dashboard_ids:
            return 0
        result = await db.execute(
            delete(Dashboard).where(Dashboard.id.in_(dashboard_ids))
        )
        logger.info(f"Deleted {result.rowcount} dashboard(s)")
        return result.rowcount

    @staticmethod
    async def update_dashboards_in_category(
        db: AsyncSession,
        user: TokenData,
        category_name: str,
        dtos: List[DashboardDto],
    ) -> bool:
        """
        Replace the dashboards of a category with the given list.

        Dashboards currently in the category but absent from the list are
        deleted; the rest are created or updated. Every saved dashboard is
        then bound to the requesting author. Deleted dashboards need no
        explicit unbinding since the join rows cascade.

        Returns:
            True if the category exists, False otherwise

        Raises:
            ValidationError: If the list repeats a dashboard name
        """
        names = [dto.name for dto in dtos]
        if len(names) != len(set(names)):
            raise ValidationError("Dashboard names must be unique within a category")

        result = await db.execute(
            select(Category)
            .options(selectinload(Category.dashboards))
            .where(Category.name == category_name)
        )
        category = result.scalar_one_or_none()
        if category is None:
            return False

        dashboards_remove = difference_by_id(category.dashboards, dtos)
        if dashboards_remove:
            await DashboardService.delete_dashboards(
                db, [d.id for d in dashboards_remove]
            )

        saved = await DashboardService.save_dashboards(
            db, dtos, category_name=category_name
        )

        author = await AuthService.get_user_info(db, user)
        await AuthorService.bind_dashboards_to_author(
            db, author.email, [d.id for d in saved]
        )

        logger.info(
            f"Category {category_name}: saved {len(saved)}, removed {len(dashboards_remove)} dashboard(s)"
        )
        return True

    @staticmethod
    async def search_dashboards(db: AsyncSession, keyword: str) -> List[Dashboard]:
        """Dashboards whose name contains `keyword` (case-insensitive), with category."""
        result = await db.execute(
            select(Dashboard)
            .options(*DASHBOARD_CATEGORY_RELATIONS)
            .where(Dashboard.name.ilike(like_pattern(keyword), escape="\\"))
            .order_by(Dashboard.name)
        )
        return list(result.scalars().all())
