from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from gallery.modules.dashboards.models import Dashboard
    from gallery.modules.records.models import Record


# Join table between authors and dashboards; rows vanish with either side
author_dashboards = Table(
    "author_dashboards",
    Base.metadata,
    Column(
        "author_email",
        ForeignKey("author.email", ondelete="CASCADE", name="fk_author_dashboards_author"),
        primary_key=True,
    ),
    Column(
        "dashboard_id",
        ForeignKey("dashboard.id", ondelete="CASCADE", name="fk_author_dashboards_dashboard"),
        primary_key=True,
    ),
)


class Author(TimestampMixin, Base):
    """
    Author model - a person who edits dashboards.
    Identified by the email carried in the access token.
    """

    __tablename__ = "author"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)

    nickname: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    dashboards: Mapped[list["Dashboard"]] = relationship(
        "Dashboard",
        secondary=author_dashboards,
        back_populates="authors",
        passive_deletes=True,
    )

    records: Mapped[list["Record"]] = relationship(
        "Record", back_populates="author", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Author(email='{self.email}')>"
