from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from gallery.modules.dashboards.models import Dashboard


class Category(TimestampMixin, Base):
    """
    Category model - a named group of dashboards.
    Keyed by its name; owns the dashboards filed under it.
    """

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    dashboards: Mapped[list["Dashboard"]] = relationship(
        "Dashboard", back_populates="category", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Category(name='{self.name}')>"
