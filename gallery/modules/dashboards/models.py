from sqlalchemy import String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import BaseModel

if TYPE_CHECKING:
    from gallery.modules.authors.models import Author
    from gallery.modules.categories.models import Category
    from gallery.modules.records.models import Record
    from gallery.modules.templates.models import Template


class Dashboard(BaseModel):
    """
    Dashboard model - a collection of templates filed under a category.
    A dashboard name is unique within its category.
    """

    __tablename__ = "dashboard"

    __table_args__ = (
        UniqueConstraint("name", "category_name", name="uq_dashboard_name_category"),
    )

    category_name: Mapped[str] = mapped_column(
        ForeignKey("category.name", name="fk_dashboard_category_name"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="dashboards")

    templates: Mapped[list["Template"]] = relationship(
        "Template",
        back_populates="dashboard",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Template.index",
    )

    authors: Mapped[list["Author"]] = relationship(
        "Author",
        secondary="author_dashboards",
        back_populates="dashboards",
        passive_deletes=True,
    )

    records: Mapped[list["Record"]] = relationship(
        "Record", back_populates="dashboard", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Dashboard(id={self.id}, name='{self.name}', category='{self.category_name}')>"
