"""
Section ordering service.

ALL writes to careers_sections go through this module.

A company's sections are displayed by ascending order_index. Single-row
mutations (create, update, delete) never renumber siblings, so gaps and
duplicates can appear between reorders; reads break ties by creation time.
The bulk reorder is the only multi-row write and runs in one transaction.

Every mutation that can change the relative order of existing sections
(create, reorder, an order_index update) bumps Company.sections_version
with a compare-and-swap UPDATE. Deletes do not: a reorder that still
names a deleted section just skips it. A reorder that carries a stale
expected_version is rejected before anything is written.
"""
import logging
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import transactional
from app.exceptions import NotFoundError, StaleVersionError
from app.models.careers_section import CareersSection
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.schemas.section import SectionCreate, SectionOrderItem
from app.services.companies import ensure_company_access

logger = logging.getLogger(__name__)


async def list_sections(
    db: AsyncSession,
    company_id: UUID,
    visible_only: bool = False
) -> list[CareersSection]:
    """
    Fetch a company's sections in display order.

    The public careers page passes visible_only=True; the editor sees all.
    """
    query = select(CareersSection).where(CareersSection.company_id == company_id)
    if visible_only:
        query = query.where(CareersSection.is_visible.is_(True))

    query = query.order_by(
        CareersSection.order_index.asc(),
        CareersSection.created_at.asc(),
        CareersSection.id.asc(),
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_sections_version(db: AsyncSession, company_id: UUID) -> int:
    result = await db.execute(
        select(Company.sections_version).where(Company.id == company_id)
    )
    version = result.scalar_one_or_none()
    if version is None:
        raise NotFoundError("Company", company_id)
    return version


async def bump_sections_version(
    db: AsyncSession,
    company_id: UUID,
    expected_version: Optional[int] = None
) -> int:
    """
    Increment the company's sections_version inside the caller's transaction.

    With expected_version the UPDATE only matches while the stored value is
    unchanged, so two writers holding the same version cannot both succeed.

    Returns:
        The new version

    Raises:
        StaleVersionError: If expected_version no longer matches
        NotFoundError: If the company does not exist
    """
    stmt = update(Company).where(Company.id == company_id)
    if expected_version is not None:
        stmt = stmt.where(Company.sections_version == expected_version)
    stmt = stmt.values(sections_version=Company.sections_version + 1).execution_options(
        synchronize_session=False
    )

    result = await db.execute(stmt)
    if result.rowcount != 1:
        current = await get_sections_version(db, company_id)
        raise StaleVersionError(expected_version, current)

    return await get_sections_version(db, company_id)


async def get_owned_section(
    db: AsyncSession,
    recruiter: Recruiter,
    section_id: UUID
) -> CareersSection:
    """
    Raises:
        NotFoundError: If the section does not exist
        NotAuthorizedError: If it belongs to another company
    """
    section = await db.get(CareersSection, section_id)
    if section is None:
        raise NotFoundError("Section", section_id)
    ensure_company_access(recruiter, section.company_id)
    return section


async def create_section(db: AsyncSession, data: SectionCreate) -> tuple[CareersSection, int]:
    """
    Insert one section at the caller-supplied order_index.

    Returns:
        (section, the sections_version written by this insert)
    """
    section = CareersSection(
        company_id=data.company_id,
        type=data.type,
        title=data.title,
        content=data.content,
        media_url=str(data.media_url) if data.media_url is not None else None,
        order_index=data.order_index,
        is_visible=data.is_visible,
    )

    async with transactional(db):
        db.add(section)
        version = await bump_sections_version(db, data.company_id)

    await db.refresh(section)
    logger.info(
        f"Created section {section.id} ({section.type.value}) for company "
        f"{section.company_id} at order_index {section.order_index}, version {version}"
    )
    return section, version


async def update_section(
    db: AsyncSession,
    section: CareersSection,
    update_data: dict
) -> tuple[CareersSection, int]:
    """
    Apply a partial update to one section.

    None is ignored for every field except media_url, which it clears.

    Returns:
        (section, the company's sections_version as of this update)
    """
    order_changed = False

    async with transactional(db):
        for field, value in update_data.items():
            if field == "media_url":
                value = str(value) if value is not None else None
            elif value is None:
                continue
            if field == "order_index" and value != section.order_index:
                order_changed = True
            setattr(section, field, value)

        if order_changed:
            version = await bump_sections_version(db, section.company_id)
        else:
            version = await get_sections_version(db, section.company_id)

    await db.refresh(section)
    logger.info(f"Updated section {section.id}: {sorted(update_data)}")
    return section, version


async def delete_section(db: AsyncSession, section: CareersSection) -> None:
    """Delete one section. Remaining order_index values are left as they are."""
    section_id = section.id
    company_id = section.company_id

    async with transactional(db):
        await db.delete(section)

    logger.info(f"Deleted section {section_id} from company {company_id}")


async def reorder_sections(
    db: AsyncSession,
    company_id: UUID,
    items: Iterable[SectionOrderItem],
    expected_version: Optional[int] = None
) -> int:
    """
    Apply a bulk {id, order_index} update for one company.

    Pairs naming a missing section, or a section owned by another company,
    are skipped without error so a stale client list cannot fail the call.
    If an id appears twice the last pair wins. All surviving updates commit
    together; any storage error rolls back every row.

    Returns:
        The company's new sections_version

    Raises:
        StaleVersionError: If expected_version is given and outdated
    """
    items = list(items)
    ids = {item.id for item in items}

    async with transactional(db):
        version = await bump_sections_version(db, company_id, expected_version)

        result = await db.execute(
            select(CareersSection).where(CareersSection.id.in_(ids))
        )
        owned = {
            section.id: section
            for section in result.scalars().all()
            if section.company_id == company_id
        }

        applied = 0
        for item in items:
            section = owned.get(item.id)
            if section is None:
                logger.debug(f"Reorder for company {company_id} skipped section {item.id}")
                continue
            section.order_index = item.order_index
            applied += 1

    logger.info(
        f"Reordered sections for company {company_id}: "
        f"{applied} applied, {len(items) - applied} skipped, version {version}"
    )
    return version
