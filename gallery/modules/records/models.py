from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import Base, generate_uuid

if TYPE_CHECKING:
    from gallery.modules.authors.models import Author
    from gallery.modules.dashboards.models import Dashboard
    from gallery.modules.elements.models import Element
    from gallery.modules.templates.models import Template


class Record(Base):
    """
    Record model - an author's note against one element of a dashboard.
    Append-only, so there is no updated_at.
    """

    __tablename__ = "record"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_uuid
    )

    author_email: Mapped[str] = mapped_column(
        ForeignKey("author.email", ondelete="CASCADE", name="fk_record_author_email"),
        nullable=False,
        index=True,
    )

    dashboard_id: Mapped[str] = mapped_column(
        ForeignKey("dashboard.id", ondelete="CASCADE", name="fk_record_dashboard_id"),
        nullable=False,
        index=True,
    )

    template_id: Mapped[str] = mapped_column(
        ForeignKey("template.id", ondelete="CASCADE", name="fk_record_template_id"),
        nullable=False,
    )

    element_id: Mapped[str] = mapped_column(
        ForeignKey("element.id", ondelete="CASCADE", name="fk_record_element_id"),
        nullable=False,
    )

    note: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=datetime.now,
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    # Relationships
    author: Mapped["Author"] = relationship("Author", back_populates="records")
    dashboard: Mapped["Dashboard"] = relationship("Dashboard", back_populates="records")
    template: Mapped["Template"] = relationship("Template", back_populates="records")
    element: Mapped["Element"] = relationship("Element", back_populates="records")

    def __repr__(self) -> str:
        return f"<Record(id={self.id}, author='{self.author_email}', element={self.element_id})>"
