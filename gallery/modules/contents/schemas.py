"""
Content DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime


class CreateContentDto(BaseModel):
    """DTO for creating (or overwriting, when `id` is given) a content"""

    id: Optional[str] = None
    element_id: str
    date: datetime
    title: str = Field(..., min_length=1, max_length=255)
    data: Any
    config: Optional[Any] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class UpdateContentDto(BaseModel):
    """DTO for updating content fields"""

    date: Optional[datetime] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    data: Optional[Any] = None
    config: Optional[Any] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ContentResponse(BaseModel):
    """Response model for Content entity"""

    id: str
    element_id: str
    date: datetime
    title: str
    data: Any
    config: Optional[Any] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ContentPaginatedResponse(BaseModel):
    """Paginated response for contents of an element"""

    items: List[ContentResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool

    class Config:
        from_attributes = True
