"""Company (tenant) business logic."""
import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotAuthorizedError, NotFoundError
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.schemas.company import normalize_slug

logger = logging.getLogger(__name__)

URL_FIELDS = ("logo_url", "banner_url", "culture_video_url")


def ensure_company_access(recruiter: Recruiter, company_id: UUID) -> None:
    """Raise NotAuthorizedError unless the recruiter belongs to company_id."""
    if recruiter.company_id != company_id:
        logger.warning(
            f"Recruiter {recruiter.email} (company {recruiter.company_id}) "
            f"attempted to access company {company_id}"
        )
        raise NotAuthorizedError()


async def get_company_by_slug(db: AsyncSession, slug: str) -> Company:
    """
    Look up a company by slug, case-insensitively.

    Raises:
        ValueError: If the slug is malformed
        NotFoundError: If no company has this slug
    """
    result = await db.execute(
        select(Company).where(Company.slug == normalize_slug(slug))
    )
    company = result.scalar_one_or_none()
    if company is None:
        raise NotFoundError("Company", slug)
    return company


async def get_owned_company(db: AsyncSession, recruiter: Recruiter, company_id: UUID) -> Company:
    ensure_company_access(recruiter, company_id)
    company = await db.get(Company, company_id)
    if company is None:
        raise NotFoundError("Company", company_id)
    return company


async def update_company(db: AsyncSession, company: Company, update_data: dict) -> Company:
    """
    Apply a partial branding update.

    URL fields may be cleared with None; other fields ignore None.
    """
    for field, value in update_data.items():
        if value is None and field not in URL_FIELDS:
            continue
        if field in URL_FIELDS and value is not None:
            # Pydantic already validated them
            value = str(value)
        setattr(company, field, value)

    await db.commit()
    await db.refresh(company)
    logger.info(f"Updated company {company.slug}: {sorted(update_data)}")
    return company


async def delete_company(db: AsyncSession, company: Company) -> None:
    """Delete a company together with its recruiters, sections and jobs."""
    slug = company.slug
    await db.delete(company)
    await db.commit()
    logger.info(f"Deleted company {slug}")
