"""
Company endpoints.

Public: look up a careers page by slug.
Protected: read, rebrand or delete the caller's own company.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_recruiter
from app.database import get_db
from app.models.recruiter import Recruiter
from app.schemas.common import SuccessResponse
from app.schemas.company import CompanyResponse, CompanyUpdate
from app.services.companies import (
    delete_company,
    get_company_by_slug,
    get_owned_company,
    update_company,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/slug/{slug}", response_model=CompanyResponse)
async def get_by_slug(
    slug: str,
    db: AsyncSession = Depends(get_db)
):
    """Public lookup used by the careers page route. Case-insensitive."""
    try:
        return await get_company_by_slug(db, slug)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid slug")


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    return await get_owned_company(db, current_recruiter, company_id)


@router.put("/{company_id}", response_model=CompanyResponse)
async def update(
    company_id: UUID,
    company_data: CompanyUpdate,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Update name, branding URLs and colours (partial update)."""
    company = await get_owned_company(db, current_recruiter, company_id)
    return await update_company(db, company, company_data.model_dump(exclude_unset=True))


@router.delete("/{company_id}", response_model=SuccessResponse)
async def delete(
    company_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete the caller's company.

    Cascades to every recruiter, section and job of the company, including
    the caller's own account.
    """
    company = await get_owned_company(db, current_recruiter, company_id)
    await delete_company(db, company)
    return SuccessResponse()
