"""Company-related Pydantic schemas."""
import re
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
SLUG_MAX_LENGTH = 50
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


def normalize_slug(value: str) -> str:
    """
    Case-fold and validate a company slug.

    "TechCorp" and "techcorp" are the same slug, so everything is stored
    lowercase. Raises ValueError for anything outside [a-z0-9-]+.
    """
    slug = value.strip().lower()
    if not slug or len(slug) > SLUG_MAX_LENGTH:
        raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
    if not SLUG_PATTERN.match(slug):
        raise ValueError("Slug may only contain lowercase letters, digits and hyphens")
    return slug


class CompanyUpdate(BaseModel):
    """Partial branding update. Sending null for a URL clears it."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    logo_url: Optional[HttpUrl] = None
    banner_url: Optional[HttpUrl] = None
    culture_video_url: Optional[HttpUrl] = None
    primary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)


class CompanyResponse(BaseModel):
    id: UUID
    name: str
    slug: str
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    culture_video_url: Optional[str] = None
    primary_color: str
    secondary_color: str
    sections_version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

