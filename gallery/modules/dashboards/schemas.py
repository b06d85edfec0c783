"""
Dashboard DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from gallery.modules.categories.schemas import CategoryResponse
from gallery.modules.templates.schemas import TemplateResponse, TemplateFullResponse


class DashboardDto(BaseModel):
    """
    Dashboard as sent by the client.
    Without `id` a new dashboard is created, otherwise the existing one is overwritten.
    `category_name` is required when creating outside of a category route.
    """

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category_name: Optional[str] = Field(None, min_length=1, max_length=255)

    class Config:
        from_attributes = True


class ModifyDashboardDto(BaseModel):
    """DTO for renaming/redescribing a dashboard"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class DashboardResponse(BaseModel):
    """Response model for Dashboard entity (no relations)"""

    id: str
    name: str
    description: Optional[str] = None
    category_name: str

    class Config:
        from_attributes = True


class DashboardWithCategoryResponse(DashboardResponse):
    category: CategoryResponse


class DashboardTemplateResponse(DashboardWithCategoryResponse):
    """Dashboard with its category and templates (no elements)"""

    templates: List[TemplateResponse]


class DashboardFullResponse(DashboardWithCategoryResponse):
    """Dashboard with category, templates, elements and contents"""

    templates: List[TemplateFullResponse]


class DeleteResult(BaseModel):
    message: str
    affected: int
