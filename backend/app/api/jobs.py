"""
Jobs API endpoints.
Handles the public job board and job listing CRUD for recruiters.
"""
import logging
from typing import Optional, List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_recruiter
from app.database import get_db
from app.models.job import JobType
from app.models.recruiter import Recruiter
from app.schemas.common import SuccessResponse
from app.schemas.job import JobCreate, JobFiltersResponse, JobResponse, JobUpdate
from app.services import jobs as job_service
from app.services.companies import ensure_company_access

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================
# PUBLIC ENDPOINTS
# ============================================================

@router.get("/public/{company_id}", response_model=List[JobResponse])
async def list_public_jobs(
    company_id: UUID,
    q: Optional[str] = Query(None, max_length=200, description="Search title and description"),
    location: Optional[str] = Query(None, description="Exact location"),
    job_type: Optional[JobType] = Query(None, description="Job type"),
    db: AsyncSession = Depends(get_db)
):
    """
    Active jobs for the public careers page, newest first.
    Filters combine; omitted filters match everything.
    """
    jobs = await job_service.list_jobs(
        db,
        company_id,
        active_only=True,
        search=q,
        location=location,
        job_type=job_type,
    )
    logger.debug(f"Listed {len(jobs)} public jobs for company {company_id} (q={q}, location={location}, job_type={job_type})")
    return jobs


@router.get("/public/{company_id}/filters", response_model=JobFiltersResponse)
async def list_public_job_filters(
    company_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Distinct locations, job types and departments for the filter dropdowns."""
    return await job_service.get_job_filters(db, company_id)


# ============================================================
# PROTECTED ENDPOINTS
# ============================================================

@router.get("/company/{company_id}", response_model=List[JobResponse])
async def list_company_jobs(
    company_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """All jobs of the caller's company, inactive ones included."""
    ensure_company_access(current_recruiter, company_id)
    return await job_service.list_jobs(db, company_id)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    return await job_service.get_owned_job(db, current_recruiter, job_id)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    job: JobCreate,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    ensure_company_access(current_recruiter, job.company_id)
    return await job_service.create_job(db, job)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: UUID,
    job_data: JobUpdate,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Partial update of a job listing."""
    job = await job_service.get_owned_job(db, current_recruiter, job_id)
    return await job_service.update_job(db, job, job_data.model_dump(exclude_unset=True))


@router.delete("/{job_id}", response_model=SuccessResponse)
async def delete_job(
    job_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    job = await job_service.get_owned_job(db, current_recruiter, job_id)
    await job_service.delete_job(db, job)
    return SuccessResponse()
