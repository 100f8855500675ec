"""Careers section Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from app.models.careers_section import SectionType

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10000


class SectionCreate(BaseModel):
    """Schema for creating a section. order_index defaults to 0; siblings are not shifted."""
    company_id: UUID
    type: SectionType
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field("", max_length=CONTENT_MAX_LENGTH)
    media_url: Optional[HttpUrl] = None
    order_index: int = Field(0, ge=0)
    is_visible: bool = True


class SectionUpdate(BaseModel):
    """Partial update. Only media_url can be cleared by sending null."""
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(None, max_length=CONTENT_MAX_LENGTH)
    media_url: Optional[HttpUrl] = None
    order_index: Optional[int] = Field(None, ge=0)
    is_visible: Optional[bool] = None


class SectionOrderItem(BaseModel):
    id: UUID
    order_index: int = Field(..., ge=0)


class SectionOrderRequest(BaseModel):
    """
    Bulk reorder body.

    expected_version is optional: when given, the whole call is rejected
    if the company's sections changed since the client last read them.
    """
    sections: list[SectionOrderItem] = Field(..., min_length=1)
    expected_version: Optional[int] = Field(None, ge=0)


class SectionOrderResponse(BaseModel):
    success: bool = True
    version: int


class SectionResponse(BaseModel):
    id: UUID
    company_id: UUID
    type: SectionType
    title: str
    content: str
    media_url: Optional[str] = None
    order_index: int
    is_visible: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
