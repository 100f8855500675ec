"""Tests for the sample-tenant seed script."""
import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.company import Company
from app.seed import SAMPLE_TENANTS, seed_tenants


@pytest.mark.asyncio
async def test_seed_creates_sample_tenants(async_client: AsyncClient, db: AsyncSession):
    created = await seed_tenants(db)

    assert created == len(SAMPLE_TENANTS)

    company = await async_client.get("/api/companies/slug/techcorp")
    assert company.status_code == 200
    sections = await async_client.get(f"/api/sections/public/{company.json()['id']}")
    assert [s["order_index"] for s in sections.json()] == [0, 1, 2]
    jobs = await async_client.get(f"/api/jobs/public/{company.json()['id']}")
    assert len(jobs.json()) == 3

    login = await async_client.post(
        "/api/auth/login",
        json={"email": "hr@greenenergy.com", "password": "password123"}
    )
    assert login.status_code == 200
    assert login.json()["company"]["slug"] == "greenenergy"


@pytest.mark.asyncio
async def test_seed_skips_existing_slugs(db: AsyncSession, company: Company):
    created = await seed_tenants(db)

    assert created == len(SAMPLE_TENANTS) - 1
    result = await db.execute(select(func.count()).select_from(Company))
    assert result.scalar_one() == len(SAMPLE_TENANTS)

    assert await seed_tenants(db) == 0
