"""
Seed sample tenants: companies, recruiters, sections and jobs.

Usage: python -m app.seed
Tenants whose slug already exists are left untouched.
"""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app import database
from app.models.careers_section import CareersSection, SectionType
from app.models.company import Company
from app.models.job import Job, JobType
from app.models.recruiter import Recruiter
from app.services.auth import hash_password

logger = logging.getLogger(__name__)

SAMPLE_TENANTS = [
    {
        "company": {
            "name": "TechCorp Solutions",
            "slug": "techcorp",
            "primary_color": "#2563EB",
            "secondary_color": "#1E40AF",
        },
        "recruiter": {"email": "recruiter@techcorp.com", "password": "password123", "name": "John Smith"},
        "sections": [
            (SectionType.ABOUT, "About TechCorp",
             "TechCorp Solutions builds software for enterprise clients worldwide."),
            (SectionType.VALUES, "Our Values",
             "Innovation, integrity, collaboration and excellence."),
            (SectionType.BENEFITS, "Benefits & Perks",
             "Competitive salary and equity, health insurance, flexible and remote work."),
        ],
        "jobs": [
            {"title": "Senior Software Engineer", "location": "San Francisco, CA",
             "job_type": JobType.FULL_TIME, "department": "Engineering",
             "salary_range": "$150,000 - $200,000"},
            {"title": "Product Manager", "location": "New York, NY",
             "job_type": JobType.FULL_TIME, "department": "Product",
             "salary_range": "$130,000 - $170,000"},
            {"title": "UX Designer", "location": "Remote",
             "job_type": JobType.REMOTE, "department": "Design",
             "salary_range": "$100,000 - $140,000"},
        ],
    },
    {
        "company": {
            "name": "GreenEnergy Inc",
            "slug": "greenenergy",
            "primary_color": "#059669",
            "secondary_color": "#047857",
        },
        "recruiter": {"email": "hr@greenenergy.com", "password": "password123", "name": "Jane Doe"},
        "sections": [
            (SectionType.ABOUT, "About GreenEnergy",
             "GreenEnergy designs and installs solar, wind and storage systems."),
            (SectionType.MISSION, "Our Mission",
             "Make clean energy accessible and affordable for everyone."),
        ],
        "jobs": [
            {"title": "Solar Installation Technician", "location": "Austin, TX",
             "job_type": JobType.FULL_TIME, "department": "Operations"},
            {"title": "Energy Analyst Intern", "location": "Denver, CO",
             "job_type": JobType.INTERNSHIP, "department": "Analytics"},
        ],
    },
]


async def seed_tenants(db: AsyncSession) -> int:
    """Create the sample tenants. Returns how many were created."""
    created = 0
    for tenant in SAMPLE_TENANTS:
        result = await db.execute(
            select(Company.id).where(Company.slug == tenant["company"]["slug"])
        )
        if result.scalar_one_or_none() is not None:
            logger.info(f"Skipping existing company {tenant['company']['slug']}")
            continue

        company = Company(**tenant["company"])
        db.add(company)
        await db.flush()

        recruiter = tenant["recruiter"]
        db.add(Recruiter(
            email=recruiter["email"],
            password_hash=hash_password(recruiter["password"]),
            name=recruiter["name"],
            company_id=company.id,
        ))

        for order_index, (section_type, title, content) in enumerate(tenant["sections"]):
            db.add(CareersSection(
                company_id=company.id,
                type=section_type,
                title=title,
                content=content,
                order_index=order_index,
            ))

        for job in tenant["jobs"]:
            db.add(Job(company_id=company.id, **job))

        created += 1
        logger.info(f"Seeded company {company.slug}")

    await db.commit()
    return created


async def main() -> None:
    async with database.AsyncSessionLocal() as db:
        created = await seed_tenants(db)
    logger.info(f"Seeding finished: {created} companies created")
    await database.engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    asyncio.run(main())
