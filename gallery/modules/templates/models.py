from sqlalchemy import Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import BaseModel

if TYPE_CHECKING:
    from gallery.modules.dashboards.models import Dashboard
    from gallery.modules.elements.models import Element
    from gallery.modules.records.models import Record


class Template(BaseModel):
    """
    Template model - one page/tab of a dashboard, holding a grid of elements.
    Template names are unique within a dashboard.
    """

    __tablename__ = "template"

    __table_args__ = (
        UniqueConstraint("name", "dashboard_id", name="uq_template_name_dashboard"),
    )

    dashboard_id: Mapped[str] = mapped_column(
        ForeignKey("dashboard.id", ondelete="CASCADE", name="fk_template_dashboard_id"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    dashboard: Mapped["Dashboard"] = relationship("Dashboard", back_populates="templates")

    elements: Mapped[list["Element"]] = relationship(
        "Element",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    records: Mapped[list["Record"]] = relationship(
        "Record", back_populates="template", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Template(id={self.id}, name='{self.name}', index={self.index})>"
