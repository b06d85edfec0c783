"""
Template DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from gallery.modules.elements.schemas import ElementResponse, ElementWithContentsResponse


class TemplateDto(BaseModel):
    """Template as sent by the dashboard editor"""

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    index: int = Field(0, ge=0)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CreateTemplateDto(TemplateDto):
    """DTO for saving a single template into a dashboard"""

    dashboard_id: str


class UpdateTemplateDto(BaseModel):
    """DTO for updating template information"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    index: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class TemplateResponse(BaseModel):
    """Response model for Template entity"""

    id: str
    dashboard_id: str
    name: str
    index: int
    description: Optional[str] = None

    class Config:
        from_attributes = True


class TemplateDetailResponse(TemplateResponse):
    """Template with its elements"""

    elements: List[ElementResponse]


class TemplateFullResponse(TemplateResponse):
    """Template with elements and their contents"""

    elements: List[ElementWithContentsResponse]
