"""
Tests for CareersClient against the real app over ASGITransport.

Covers the editor contract: draft commit with one bulk reorder, reconcile
after commit, and rollback of optimistic edits when the server rejects them.
"""
import os
import subprocess
import sys
from pathlib import Path

import httpx
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.client import CareersClient
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.services.auth import create_access_token
from app.services.section_draft import SectionDraft
from tests.conftest import make_sections


@pytest.fixture
def careers(async_client: AsyncClient, recruiter: Recruiter) -> CareersClient:
    return CareersClient(async_client, token=create_access_token(recruiter.id))


def titles(sections):
    return [section["title"] for section in sections]


@pytest.mark.asyncio
async def test_load_draft_reads_owner_list_and_version(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B", "C"], hidden=("B",))

    draft = await careers.load_draft(company.id)

    assert titles(draft.draft) == ["A", "B", "C"]
    assert draft.version == 0
    assert not draft.dirty


@pytest.mark.asyncio
async def test_public_list_has_no_version(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B"], hidden=("A",))

    sections, version = await careers.list_sections(company.id, public=True)

    assert titles(sections) == ["B"]
    assert version is None


@pytest.mark.asyncio
async def test_publish_order_commits_and_reconciles(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B", "C"])
    draft = await careers.load_draft(company.id)

    draft.move(2, 0)
    assert draft.dirty
    await careers.publish_order(company.id, draft)

    assert titles(draft.confirmed) == ["C", "A", "B"]
    assert not draft.dirty
    assert draft.version == 1

    sections, _ = await careers.list_sections(company.id)
    assert titles(sections) == ["C", "A", "B"]


@pytest.mark.asyncio
async def test_publish_order_twice_uses_fresh_version(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B", "C"])
    draft = await careers.load_draft(company.id)

    draft.move(0, 2)
    await careers.publish_order(company.id, draft)
    draft.move(0, 1)
    await careers.publish_order(company.id, draft)

    assert titles(draft.confirmed) == ["C", "B", "A"]
    assert draft.version == 2


@pytest.mark.asyncio
async def test_publish_stale_draft_rolls_back(careers: CareersClient, db: AsyncSession, company: Company):
    """Another editor commits first; our commit gets 409 and the draft reverts."""
    await make_sections(db, company, ["A", "B", "C"])
    ours = await careers.load_draft(company.id)
    theirs = await careers.load_draft(company.id)

    theirs.move(0, 2)
    await careers.publish_order(company.id, theirs)

    ours.move(2, 0)
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await careers.publish_order(company.id, ours)

    assert exc_info.value.response.status_code == 409
    assert exc_info.value.response.json()["current_version"] == 1
    assert titles(ours.draft) == ["A", "B", "C"]
    assert not ours.dirty

    sections, _ = await careers.list_sections(company.id)
    assert titles(sections) == ["B", "C", "A"]


@pytest.mark.asyncio
async def test_publish_empty_draft_skips_request(careers: CareersClient, company: Company):
    draft = SectionDraft([], version=0)

    result = await careers.publish_order(company.id, draft)

    assert result is draft
    assert draft.version == 0


@pytest.mark.asyncio
async def test_toggle_visibility_confirms_server_copy(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B"])
    draft = await careers.load_draft(company.id)
    section_id = draft.draft[0]["id"]

    updated = await careers.toggle_visibility(draft, section_id)

    assert updated["is_visible"] is False
    assert draft.draft[0]["is_visible"] is False
    assert not draft.dirty
    public, _ = await careers.list_sections(company.id, public=True)
    assert titles(public) == ["B"]


@pytest.mark.asyncio
async def test_toggle_visibility_failure_restores_draft(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B"])
    draft = await careers.load_draft(company.id)
    section_id = draft.draft[0]["id"]

    # Removed by someone else after our read
    await careers.http.delete(f"/api/sections/{section_id}", headers=careers._headers())

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await careers.toggle_visibility(draft, section_id)

    assert exc_info.value.response.status_code == 404
    assert draft.draft[0]["is_visible"] is True
    assert not draft.dirty


@pytest.mark.asyncio
async def test_delete_section_confirms_removal(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B", "C"])
    draft = await careers.load_draft(company.id)

    await careers.delete_section(draft, draft.draft[1]["id"])

    assert titles(draft.draft) == ["A", "C"]
    assert not draft.dirty
    sections, version = await careers.list_sections(company.id)
    assert [(s["title"], s["order_index"]) for s in sections] == [("A", 0), ("C", 2)]
    assert version == draft.version


@pytest.mark.asyncio
async def test_delete_section_failure_restores_draft(
    async_client: AsyncClient,
    careers: CareersClient,
    db: AsyncSession,
    company: Company
):
    await make_sections(db, company, ["A", "B"])
    draft = await careers.load_draft(company.id)
    anonymous = CareersClient(async_client)

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await anonymous.delete_section(draft, draft.draft[0]["id"])

    assert exc_info.value.response.status_code == 401
    assert titles(draft.draft) == ["A", "B"]
    assert titles(draft.confirmed) == ["A", "B"]


@pytest.mark.asyncio
async def test_create_section_appends_to_draft(careers: CareersClient, company: Company):
    draft = await careers.load_draft(company.id)

    created = await careers.create_section(draft, company.id, type="values", title="Values")

    assert created["title"] == "Values"
    assert created["order_index"] == 0
    assert titles(draft.draft) == ["Values"]
    assert not draft.dirty
    sections, version = await careers.list_sections(company.id)
    assert titles(sections) == ["Values"]
    assert draft.version == version == 1


@pytest.mark.asyncio
async def test_create_section_keeps_explicit_order_index(careers: CareersClient, company: Company):
    draft = await careers.load_draft(company.id)

    created = await careers.create_section(draft, company.id, type="values", title="Values", order_index=3)

    assert created["order_index"] == 3


@pytest.mark.asyncio
async def test_create_then_move_then_publish(careers: CareersClient, db: AsyncSession, company: Company):
    """A section created in the editor can be dragged and committed without a stale version."""
    await make_sections(db, company, ["A", "B"])
    draft = await careers.load_draft(company.id)

    await careers.create_section(draft, company.id, type="custom", title="C")
    assert titles(draft.draft) == ["A", "B", "C"]
    assert draft.draft[2]["order_index"] == 2

    draft.move(2, 0)
    await careers.publish_order(company.id, draft)

    assert titles(draft.confirmed) == ["C", "A", "B"]
    assert draft.version == 2
    sections, version = await careers.list_sections(company.id)
    assert titles(sections) == ["C", "A", "B"]
    assert version == 2


@pytest.mark.asyncio
async def test_create_section_failure_leaves_draft(async_client: AsyncClient, careers: CareersClient,
                                                   db: AsyncSession, company: Company):
    await make_sections(db, company, ["A"])
    draft = await careers.load_draft(company.id)
    anonymous = CareersClient(async_client)

    with pytest.raises(httpx.HTTPStatusError):
        await anonymous.create_section(draft, company.id, type="custom", title="B")

    assert titles(draft.draft) == ["A"]
    assert draft.version == 0


@pytest.mark.asyncio
async def test_toggle_visibility_keeps_draft_version(careers: CareersClient, db: AsyncSession, company: Company):
    await make_sections(db, company, ["A", "B"])
    draft = await careers.load_draft(company.id)

    await careers.toggle_visibility(draft, draft.draft[0]["id"])
    draft.move(1, 0)
    await careers.publish_order(company.id, draft)

    assert titles(draft.confirmed) == ["B", "A"]
    assert draft.version == 1


@pytest.mark.asyncio
async def test_publish_order_keeps_committed_version_when_reread_fails(
    careers: CareersClient,
    db: AsyncSession,
    company: Company,
    monkeypatch
):
    await make_sections(db, company, ["A", "B", "C"])
    draft = await careers.load_draft(company.id)
    draft.move(2, 0)

    async def unreachable(*args, **kwargs):
        raise httpx.ConnectError("connection reset")

    monkeypatch.setattr(careers, "list_sections", unreachable)
    with pytest.raises(httpx.ConnectError):
        await careers.publish_order(company.id, draft)
    monkeypatch.undo()

    assert titles(draft.draft) == ["C", "A", "B"]
    assert not draft.dirty
    assert draft.version == 1

    draft.move(0, 2)
    await careers.publish_order(company.id, draft)

    assert titles(draft.confirmed) == ["A", "B", "C"]
    assert draft.version == 2


def test_client_imports_without_database_settings(tmp_path):
    """The client module must not pull in the engine or require server settings."""
    backend_dir = Path(__file__).resolve().parent.parent
    env = {k: v for k, v in os.environ.items() if k not in ("DATABASE_URL", "SECRET_KEY")}
    env["PYTHONPATH"] = str(backend_dir)
    script = "import sys, app.client; assert 'app.database' not in sys.modules, 'database imported'"

    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
