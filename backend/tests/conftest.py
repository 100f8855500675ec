"""
Pytest fixtures for testing.
"""
import os

# Settings are read at import time; provide test values before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")

import pytest
import pytest_asyncio
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Import database module BEFORE app to allow override
import app.database
from app.database import Base
# Import ALL models so Base.metadata knows about all tables
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.models.careers_section import CareersSection, SectionType
from app.models.job import Job
from app.services.auth import create_access_token, hash_password

# Now import app (after we can override database)
from app.main import app as fastapi_app


# Test database URL (use in-memory SQLite for fast tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.
    Ensures cleanup happens even if test fails.
    """
    # StaticPool keeps a single connection alive so every session
    # sees the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Replace the app's engine and sessionmaker so get_db() uses the test DB
    original_engine = app.database.engine
    original_sessionmaker = app.database.AsyncSessionLocal

    app.database.engine = test_engine
    app.database.AsyncSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    session = async_session()

    try:
        yield session
    finally:
        await session.close()
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await test_engine.dispose()

        app.database.engine = original_engine
        app.database.AsyncSessionLocal = original_sessionmaker


@pytest_asyncio.fixture
async def async_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Unauthenticated HTTP client against the app.

    The db fixture already replaced app.database.engine with the test
    engine, so all endpoints use the test database.
    """
    transport = ASGITransport(app=fastapi_app)

    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        follow_redirects=True
    ) as client:
        yield client


async def make_tenant(db: AsyncSession, slug: str, email: str) -> tuple[Company, Recruiter]:
    """Create a company with one recruiter."""
    company = Company(name=slug.title(), slug=slug)
    db.add(company)
    await db.flush()

    recruiter = Recruiter(
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        name="Test Recruiter",
        company_id=company.id,
    )
    db.add(recruiter)
    await db.commit()
    await db.refresh(company)
    await db.refresh(recruiter)
    return company, recruiter


async def make_sections(
    db: AsyncSession,
    company: Company,
    titles: list[str],
    hidden: tuple[str, ...] = ()
) -> list[CareersSection]:
    """Create sections with order_index 0..N-1 in the given title order."""
    sections = []
    for order_index, title in enumerate(titles):
        section = CareersSection(
            company_id=company.id,
            type=SectionType.CUSTOM,
            title=title,
            content=f"{title} content",
            order_index=order_index,
            is_visible=title not in hidden,
        )
        db.add(section)
        sections.append(section)
    await db.commit()
    for section in sections:
        await db.refresh(section)
    return sections


def auth_headers(recruiter: Recruiter) -> dict:
    return {"Authorization": f"Bearer {create_access_token(recruiter.id)}"}


@pytest_asyncio.fixture
async def tenant(db: AsyncSession) -> tuple[Company, Recruiter]:
    return await make_tenant(db, "techcorp", "recruiter@techcorp.com")


@pytest_asyncio.fixture
async def company(tenant) -> Company:
    return tenant[0]


@pytest_asyncio.fixture
async def recruiter(tenant) -> Recruiter:
    return tenant[1]


@pytest_asyncio.fixture
async def other_tenant(db: AsyncSession) -> tuple[Company, Recruiter]:
    """A second, unrelated company for cross-tenant checks."""
    return await make_tenant(db, "greenenergy", "hr@greenenergy.com")


@pytest_asyncio.fixture
async def client(async_client: AsyncClient, recruiter: Recruiter) -> AsyncClient:
    """Client authenticated as the techcorp recruiter via bearer header."""
    async_client.headers.update(auth_headers(recruiter))
    return async_client


@pytest.fixture
def sample_job_data():
    return {
        "title": "Senior Software Engineer",
        "description": "Build and scale our careers platform.",
        "location": "San Francisco, CA",
        "department": "Engineering",
        "salary_range": "$150,000 - $200,000",
        "requirements": "5+ years of Python",
        "job_type": "full-time",
        "is_active": True,
    }
