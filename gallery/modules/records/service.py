"""
RecordService - author notes against dashboard elements.
"""

import logging
from typing import List, Optional, Tuple
from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.exceptions import NotFoundError, ValidationError
from gallery.core.pagination import DEFAULT_PAGE_SIZE, paginate_query
from gallery.modules.authors.auth import AuthService, TokenData
from gallery.modules.elements.models import Element
from gallery.modules.templates.models import Template
from .models import Record
from .schemas import CreateRecordDto, FilterRecordsDto

logger = logging.getLogger(__name__)


class RecordService:

    @staticmethod
    async def get_records(
        db: AsyncSession,
        filters: Optional[FilterRecordsDto] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Tuple[List[Record], int]:
        """
        Records newest first, optionally filtered.

        Args:
            filters: Optional dashboard/template/element/author filters

        Returns:
            Tuple of (page of records, total count)
        """
        query = select(Record)

        if filters:
            if filters.dashboard_id:
                query = query.where(Record.dashboard_id == filters.dashboard_id)
            if filters.template_id:
                query = query.where(Record.template_id == filters.template_id)
            if filters.element_id:
                query = query.where(Record.element_id == filters.element_id)
            if filters.author_email:
                query = query.where(Record.author_email == filters.author_email)

        query = query.order_by(desc(Record.created_at), Record.id)
        return await paginate_query(db, query, page, page_size)

    @staticmethod
    async def save_record(
        db: AsyncSession, user: TokenData, dto: CreateRecordDto
    ) -> Record:
        """
        Create a record owned by the authenticated author.

        Raises:
            NotFoundError: If the template or element does not exist
            ValidationError: If the element is not part of the template,
                or the template not part of the dashboard
        """
        element = await db.get(Element, dto.element_id)
        if element is None:
            raise NotFoundError("Element", dto.element_id)

        template = await db.get(Template, dto.template_id)
        if template is None:
            raise NotFoundError("Template", dto.template_id)

        if element.template_id != template.id:
            raise ValidationError("Element does not belong to the given template")
        if template.dashboard_id != dto.dashboard_id:
            raise ValidationError("Template does not belong to the given dashboard")

        author = await AuthService.get_user_info(db, user)

        record = Record(
            author_email=author.email,
            dashboard_id=dto.dashboard_id,
            template_id=dto.template_id,
            element_id=dto.element_id,
            note=dto.note,
        )
        db.add(record)
        await db.flush()
        await db.refresh(record)
        logger.info(f"Author {author.email} recorded on element {dto.element_id}")
        return record

    @staticmethod
    async def delete_record(db: AsyncSession, record_id: str) -> None:
        """
        Raises:
            NotFoundError: If record not found
        """
        result = await db.execute(delete(Record).where(Record.id == record_id))
        if not result.rowcount:
            raise NotFoundError("Record", record_id)
