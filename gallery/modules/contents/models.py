from datetime import datetime
from sqlalchemy import JSON, DateTime, String, Text, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Any, Optional

from gallery.core.db.base import BaseModel

if TYPE_CHECKING:
    from gallery.modules.elements.models import Element


class Content(BaseModel):
    """
    Content model - a dated payload rendered by an element.
    `data` and `config` are free-form JSON owned by the frontend.
    """

    __tablename__ = "content"

    __table_args__ = (
        Index("idx_content_element_date", "element_id", "date"),
    )

    element_id: Mapped[str] = mapped_column(
        ForeignKey("element.id", ondelete="CASCADE", name="fk_content_element_id"),
        nullable=False,
    )

    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    data: Mapped[Any] = mapped_column(JSON, nullable=False)

    config: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    element: Mapped["Element"] = relationship("Element", back_populates="contents")

    def __repr__(self) -> str:
        return f"<Content(id={self.id}, title='{self.title}', date={self.date})>"
