"""
Careers section endpoints.

Reads:
- Public list: visible sections only, ascending order_index
- Owner list: all sections, ascending order_index, current
  sections_version in the X-Sections-Version header (also sent on
  create and update, so an editor can keep its draft current)

Writes (owner only): create, update, delete one section, and the bulk
reorder used by the drag-and-drop editor.
"""
import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_recruiter
from app.database import get_db
from app.models.recruiter import Recruiter
from app.schemas.common import SECTIONS_VERSION_HEADER, SuccessResponse
from app.schemas.section import (
    SectionCreate,
    SectionOrderRequest,
    SectionOrderResponse,
    SectionResponse,
    SectionUpdate,
)
from app.services import sections as section_service
from app.services.companies import ensure_company_access

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/public/{company_id}", response_model=List[SectionResponse])
async def list_public_sections(
    company_id: UUID,
    db: AsyncSession = Depends(get_db)
):
    """Visible sections for the public careers page."""
    return await section_service.list_sections(db, company_id, visible_only=True)


@router.get("/company/{company_id}", response_model=List[SectionResponse])
async def list_company_sections(
    company_id: UUID,
    response: Response,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """All sections, hidden ones included, for the editor."""
    ensure_company_access(current_recruiter, company_id)

    version = await section_service.get_sections_version(db, company_id)
    sections = await section_service.list_sections(db, company_id)

    response.headers[SECTIONS_VERSION_HEADER] = str(version)
    return sections


@router.post("", response_model=SectionResponse, status_code=201)
async def create_section(
    section_data: SectionCreate,
    response: Response,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Create one section. The new sections_version is sent in X-Sections-Version."""
    ensure_company_access(current_recruiter, section_data.company_id)
    section, version = await section_service.create_section(db, section_data)

    response.headers[SECTIONS_VERSION_HEADER] = str(version)
    return section


@router.put("/bulk/order", response_model=SectionOrderResponse)
async def update_order(
    order_data: SectionOrderRequest,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk reorder.

    Pairs naming sections of another company, or sections that no longer
    exist, are skipped and the call still succeeds.

    Returns:
        200: {success: true, version}
        400: Empty list, non-UUID id or negative order_index
        409: expected_version is stale; nothing was written
    """
    version = await section_service.reorder_sections(
        db,
        current_recruiter.company_id,
        order_data.sections,
        expected_version=order_data.expected_version,
    )
    return SectionOrderResponse(version=version)


@router.put("/{section_id}", response_model=SectionResponse)
async def update_section(
    section_id: UUID,
    section_data: SectionUpdate,
    response: Response,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Partial update of one section. Siblings are never renumbered."""
    section = await section_service.get_owned_section(db, current_recruiter, section_id)
    section, version = await section_service.update_section(
        db, section, section_data.model_dump(exclude_unset=True)
    )

    response.headers[SECTIONS_VERSION_HEADER] = str(version)
    return section


@router.delete("/{section_id}", response_model=SuccessResponse)
async def delete_section(
    section_id: UUID,
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Delete one section. Remaining order_index values are not compacted."""
    section = await section_service.get_owned_section(db, current_recruiter, section_id)
    await section_service.delete_section(db, section)
    return SuccessResponse()
