"""Job listing business logic."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.job import Job, JobType
from app.models.recruiter import Recruiter
from app.schemas.job import JobCreate
from app.services.companies import ensure_company_access

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Make % and _ in a search term match themselves under LIKE."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


async def list_jobs(
    db: AsyncSession,
    company_id: UUID,
    active_only: bool = False,
    search: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[JobType] = None,
) -> list[Job]:
    """
    List a company's jobs, newest first.

    search matches title or description case-insensitively; location and
    job_type must match exactly. All given filters apply together.
    """
    filters = [Job.company_id == company_id]
    if active_only:
        filters.append(Job.is_active.is_(True))
    if search:
        pattern = f"%{escape_like(search.strip())}%"
        filters.append(or_(
            Job.title.ilike(pattern, escape=LIKE_ESCAPE),
            Job.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))
    if location:
        filters.append(Job.location == location)
    if job_type is not None:
        filters.append(Job.job_type == job_type)

    query = (
        select(Job)
        .where(and_(*filters))
        .order_by(Job.created_at.desc(), Job.id.desc())
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_job_filters(db: AsyncSession, company_id: UUID) -> dict:
    """Distinct locations, job types and departments among active jobs."""
    jobs = await list_jobs(db, company_id, active_only=True)

    locations = sorted({job.location for job in jobs if job.location})
    departments = sorted({job.department for job in jobs if job.department})
    job_types = [job_type for job_type in JobType if any(job.job_type == job_type for job in jobs)]

    return {
        "locations": locations,
        "job_types": job_types,
        "departments": departments,
    }


async def get_owned_job(db: AsyncSession, recruiter: Recruiter, job_id: UUID) -> Job:
    """
    Raises:
        NotFoundError: If the job does not exist
        NotAuthorizedError: If it belongs to another company
    """
    job = await db.get(Job, job_id)
    if job is None:
        raise NotFoundError("Job", job_id)
    ensure_company_access(recruiter, job.company_id)
    return job


async def create_job(db: AsyncSession, data: JobCreate) -> Job:
    job = Job(**data.model_dump())
    db.add(job)
    await db.commit()
    await db.refresh(job)

    logger.info(f"Created job {job.id}: {job.title} for company {job.company_id}")
    return job


async def update_job(db: AsyncSession, job: Job, update_data: dict) -> Job:
    """Partial update; None leaves the title, type and active flag untouched."""
    required = {"title", "job_type", "is_active"}
    for field, value in update_data.items():
        if value is None and field in required:
            continue
        setattr(job, field, value)

    await db.commit()
    await db.refresh(job)

    logger.info(f"Updated job {job.id}: {sorted(update_data)}")
    return job


async def delete_job(db: AsyncSession, job: Job) -> None:
    job_id = job.id
    await db.delete(job)
    await db.commit()
    logger.info(f"Deleted job {job_id}")
