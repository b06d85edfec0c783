import enum
from sqlalchemy import Boolean, Integer, String, Text, ForeignKey, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING, Optional

from gallery.core.db.base import BaseModel

if TYPE_CHECKING:
    from gallery.modules.contents.models import Content
    from gallery.modules.records.models import Record
    from gallery.modules.templates.models import Template


class ElementType(str, enum.Enum):
    """Element type enum - what a grid cell renders"""

    EmbedLink = "EmbedLink"
    Text = "Text"
    Image = "Image"
    Table = "Table"
    Line = "Line"
    Bar = "Bar"
    Pie = "Pie"
    Scatter = "Scatter"
    Heatmap = "Heatmap"
    Box = "Box"
    Custom = "Custom"


class Element(BaseModel):
    """
    Element model - a single grid cell of a template.
    x/y/h/w follow the frontend grid layout units.
    """

    __tablename__ = "element"

    __table_args__ = (
        UniqueConstraint("name", "template_id", name="uq_element_name_template"),
    )

    template_id: Mapped[str] = mapped_column(
        ForeignKey("template.id", ondelete="CASCADE", name="fk_element_template_id"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    type: Mapped[ElementType] = mapped_column(
        SQLEnum(ElementType, name="element_type_enum", native_enum=False),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    time_series: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    x: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    y: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    h: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    w: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Relationships
    template: Mapped["Template"] = relationship("Template", back_populates="elements")

    contents: Mapped[list["Content"]] = relationship(
        "Content",
        back_populates="element",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    records: Mapped[list["Record"]] = relationship(
        "Record", back_populates="element", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Element(id={self.id}, name='{self.name}', type={self.type.value})>"
