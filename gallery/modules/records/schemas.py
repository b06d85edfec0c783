"""
Record DTOs (Data Transfer Objects) - request and response models
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class CreateRecordDto(BaseModel):
    """The author is taken from the access token, never from the body"""

    dashboard_id: str
    template_id: str
    element_id: str
    note: Optional[str] = None

    class Config:
        from_attributes = True


class FilterRecordsDto(BaseModel):
    dashboard_id: Optional[str] = None
    template_id: Optional[str] = None
    element_id: Optional[str] = None
    author_email: Optional[str] = None

    class Config:
        from_attributes = True


class RecordResponse(BaseModel):
    """Response model for Record entity"""

    id: str
    author_email: str
    dashboard_id: str
    template_id: str
    element_id: str
    note: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class RecordPaginatedResponse(BaseModel):
    items: List[RecordResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool

    class Config:
        from_attributes = True
