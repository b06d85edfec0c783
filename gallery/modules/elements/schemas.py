"""
Element DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from gallery.modules.contents.schemas import ContentResponse
from .models import ElementType


class ElementDto(BaseModel):
    """
    Element as sent by the template editor.
    Without `id` a new element is created, otherwise the existing one is overwritten.
    """

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    type: ElementType
    description: Optional[str] = None
    time_series: bool = False
    x: int = Field(0, ge=0)
    y: int = Field(0, ge=0)
    h: int = Field(1, ge=1)
    w: int = Field(1, ge=1)

    class Config:
        from_attributes = True


class CreateElementDto(ElementDto):
    """DTO for saving a single element into a template"""

    template_id: str


class UpdateElementDto(BaseModel):
    """DTO for updating element information"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[ElementType] = None
    description: Optional[str] = None
    time_series: Optional[bool] = None
    x: Optional[int] = Field(None, ge=0)
    y: Optional[int] = Field(None, ge=0)
    h: Optional[int] = Field(None, ge=1)
    w: Optional[int] = Field(None, ge=1)

    class Config:
        from_attributes = True


class ElementResponse(BaseModel):
    """Response model for Element entity"""

    id: str
    template_id: str
    name: str
    type: ElementType
    description: Optional[str] = None
    time_series: bool
    x: int
    y: int
    h: int
    w: int

    class Config:
        from_attributes = True


class ElementWithContentsResponse(ElementResponse):
    """Element with its contents loaded"""

    contents: List[ContentResponse]
