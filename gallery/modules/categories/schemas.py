"""
Category DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class CategoryDto(BaseModel):
    """DTO for creating or overwriting a category"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class UpdateCategoryDto(BaseModel):
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    """Response model for Category entity"""

    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CategoryDashboardResponse(BaseModel):
    """Minimal dashboard info listed under a category"""

    id: str
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CategoryWithDashboardsResponse(CategoryResponse):
    dashboards: List[CategoryDashboardResponse]
