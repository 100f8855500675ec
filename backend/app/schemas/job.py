"""Job-related Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from app.models.job import JobType

LONG_TEXT_MAX_LENGTH = 20000


class JobBase(BaseModel):
    """Common job listing fields."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT_MAX_LENGTH)
    location: Optional[str] = Field(None, max_length=200)
    department: Optional[str] = Field(None, max_length=100)
    salary_range: Optional[str] = Field(None, max_length=100)
    requirements: Optional[str] = Field(None, max_length=LONG_TEXT_MAX_LENGTH)
    job_type: JobType = JobType.FULL_TIME
    is_active: bool = True


class JobCreate(JobBase):
    """Schema for creating a job listing."""
    company_id: UUID


class JobUpdate(BaseModel):
    """Partial update; omitted fields are left untouched."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=LONG_TEXT_MAX_LENGTH)
    location: Optional[str] = Field(None, max_length=200)
    department: Optional[str] = Field(None, max_length=100)
    salary_range: Optional[str] = Field(None, max_length=100)
    requirements: Optional[str] = Field(None, max_length=LONG_TEXT_MAX_LENGTH)
    job_type: Optional[JobType] = None
    is_active: Optional[bool] = None


class JobResponse(JobBase):
    """Schema for job listing response."""
    id: UUID
    company_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobFiltersResponse(BaseModel):
    """Distinct values among a company's active jobs, for the careers page dropdowns."""
    locations: list[str]
    job_types: list[JobType]
    departments: list[str]
