"""
AuthorService - business logic over the async session.
Authors are keyed by email and own a many-to-many set of dashboards.
"""

import logging
from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gallery.core.db.persistence import save_entity
from gallery.core.exceptions import NotFoundError
from gallery.modules.dashboards.models import Dashboard
from .models import Author
from .schemas import AuthorDto

logger = logging.getLogger(__name__)


class AuthorService:
    """
    Author service.
    All methods take the request-scoped AsyncSession first and only flush;
    committing is left to the caller.
    """

    @staticmethod
    async def get_all_authors(db: AsyncSession) -> List[Author]:
        result = await db.execute(select(Author).order_by(Author.email))
        return list(result.scalars().all())

    @staticmethod
    async def get_author_by_email(db: AsyncSession, email: str) -> Optional[Author]:
        """Find an author with its dashboards, or None."""
        result = await db.execute(
            select(Author)
            .options(selectinload(Author.dashboards))
            .where(Author.email == email)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def save_author(db: AsyncSession, dto: AuthorDto) -> Author:
        author = await save_entity(db, Author, dto, key="email")
        await db.flush()
        await db.refresh(author)
        return author

    @staticmethod
    async def delete_author(db: AsyncSession, email: str) -> int:
        """Delete an author; dashboard bindings and records cascade."""
        result = await db.execute(delete(Author).where(Author.email == email))
        if result.rowcount:
            logger.info(f"Deleted author {email}")
        return result.rowcount

    @staticmethod
    async def get_or_create_author(
        db: AsyncSession, email: str, nickname: Optional[str] = None
    ) -> Author:
        """
        Find the author for an authenticated email, creating it on first sight.
        The dashboards collection is always loaded on the returned author.
        """
        result = await db.execute(
            select(Author)
            .options(selectinload(Author.dashboards))
            .where(Author.email == email)
        )
        author = result.scalar_one_or_none()

        if author is None:
            author = Author(
                email=email, nickname=nickname, description=None, dashboards=[]
            )
            db.add(author)
            await db.flush()
            logger.info(f"Registered author {email}")

        return author

    @staticmethod
    async def bind_dashboards_to_author(
        db: AsyncSession, email: str, dashboard_ids: List[str]
    ) -> Author:
        """
        Attach dashboards to an author.

        Ids already bound are skipped and unknown ids are ignored.
        The author is created if it does not exist yet.

        Args:
            email: Author email
            dashboard_ids: Ids of dashboards to bind

        Returns:
            The author with its dashboards loaded
        """
        author = await AuthorService.get_or_create_author(db, email)

        bound = {dashboard.id for dashboard in author.dashboards}
        wanted = [i for i in dict.fromkeys(dashboard_ids) if i not in bound]

        if wanted:
            result = await db.execute(
                select(Dashboard)
                .options(selectinload(Dashboard.authors))
                .where(Dashboard.id.in_(wanted))
            )
            dashboards = list(result.scalars().all())
            author.dashboards.extend(dashboards)
            await db.flush()
            logger.info(f"Bound {len(dashboards)} dashboard(s) to author {email}")

        return author

    @staticmethod
    async def unbind_dashboards_from_author(
        db: AsyncSession, email: str, dashboard_ids: List[str]
    ) -> Author:
        """
        Detach dashboards from an author.

        Raises:
            NotFoundError: If the author does not exist
        """
        result = await db.execute(
            select(Author)
            .options(selectinload(Author.dashboards).selectinload(Dashboard.authors))
            .where(Author.email == email)
        )
        author = result.scalar_one_or_none()
        if author is None:
            raise NotFoundError("Author", email)

        to_remove = set(dashboard_ids)
        author.dashboards = [d for d in author.dashboards if d.id not in to_remove]
        await db.flush()
        return author
