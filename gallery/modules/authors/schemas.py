"""
Author DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class AuthorDto(BaseModel):
    """DTO for creating or overwriting an author"""

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    nickname: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class DashboardIdsDto(BaseModel):
    dashboard_ids: List[str]

    class Config:
        from_attributes = True


class AuthorResponse(BaseModel):
    """Response model for Author entity"""

    email: str
    nickname: Optional[str] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class AuthorDashboardResponse(BaseModel):
    id: str
    name: str
    category_name: str

    class Config:
        from_attributes = True


class AuthorWithDashboardsResponse(AuthorResponse):
    dashboards: List[AuthorDashboardResponse]
