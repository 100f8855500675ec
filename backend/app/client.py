"""
Async HTTP client for the section editor.

Wraps an httpx.AsyncClient with the section endpoints and implements the
editor's optimistic-update contract on top of a SectionDraft:

- create_section appends the new section to the draft and adopts the
  sections_version the server reports, so the next commit is not stale
- publish_order commits the draft order with one bulk reorder, then
  re-reads the owner list and reconciles the draft with it
- toggle_visibility and delete_section update the draft first and put
  the previous client state back if the server call fails
"""
import logging
from typing import Any, Optional

import httpx

from app.schemas.common import SECTIONS_VERSION_HEADER
from app.services.section_draft import SectionDraft

logger = logging.getLogger(__name__)


def _version(response: httpx.Response) -> Optional[int]:
    version = response.headers.get(SECTIONS_VERSION_HEADER)
    return int(version) if version is not None else None


class CareersClient:
    """Thin typed wrapper around the /api/sections endpoints."""

    def __init__(self, http: httpx.AsyncClient, token: Optional[str] = None):
        self.http = http
        self.token = token

    def _headers(self) -> dict:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        response = await self.http.request(method, url, headers=self._headers(), **kwargs)
        response.raise_for_status()
        return response

    async def list_sections(self, company_id: Any, public: bool = False) -> tuple[list[dict], Optional[int]]:
        """Return (sections, sections_version); the version is None on the public path."""
        scope = "public" if public else "company"
        response = await self._request("GET", f"/api/sections/{scope}/{company_id}")
        return response.json(), _version(response)

    async def load_draft(self, company_id: Any) -> SectionDraft:
        sections, version = await self.list_sections(company_id)
        return SectionDraft(sections, version=version)

    async def create_section(self, draft: SectionDraft, company_id: Any, **fields) -> dict:
        """
        Create a section and append it to the draft.

        order_index defaults to the end of the draft. The draft takes the
        version the create produced, so its pending moves stay committable.
        """
        fields.setdefault("order_index", len(draft.draft))
        payload = {"company_id": str(company_id), **fields}
        response = await self._request("POST", "/api/sections", json=payload)

        section = response.json()
        draft.add(section, version=_version(response))
        return section

    async def update_section(self, section_id: Any, **fields) -> tuple[dict, Optional[int]]:
        """Return (updated section, sections_version after the update)."""
        response = await self._request("PUT", f"/api/sections/{section_id}", json=fields)
        return response.json(), _version(response)

    async def reorder(self, items: list[dict], expected_version: Optional[int] = None) -> int:
        payload: dict = {"sections": items}
        if expected_version is not None:
            payload["expected_version"] = expected_version
        response = await self._request("PUT", "/api/sections/bulk/order", json=payload)
        return response.json()["version"]

    async def publish_order(self, company_id: Any, draft: SectionDraft) -> SectionDraft:
        """
        Commit the draft order, then reconcile the draft with a fresh read.

        If the reorder fails (including a 409 for a stale version) the draft
        is rolled back to its confirmed state and the error re-raised. If
        only the follow-up read fails, the draft already holds the committed
        order and version, and the read error is re-raised.
        """
        if not draft.draft:
            return draft

        try:
            version = await self.reorder(draft.order_payload(), expected_version=draft.version)
        except httpx.HTTPError:
            logger.warning(f"Reorder for company {company_id} failed, rolling back draft")
            draft.rollback()
            raise

        draft.mark_committed(version)

        sections, version = await self.list_sections(company_id)
        draft.reconcile(sections, version=version)
        return draft

    async def toggle_visibility(self, draft: SectionDraft, section_id: Any) -> dict:
        """Flip visibility optimistically; restore the previous draft if the update fails."""
        previous = list(draft.draft)
        section = draft.toggle_visibility(section_id)
        try:
            updated, version = await self.update_section(section_id, is_visible=section["is_visible"])
        except httpx.HTTPError:
            draft.draft = previous
            raise
        draft.replace(updated)
        if version is not None:
            draft.version = version
        return updated

    async def delete_section(self, draft: SectionDraft, section_id: Any) -> None:
        """Remove optimistically; put the section back if the delete fails."""
        previous = list(draft.draft)
        draft.remove(section_id)
        try:
            await self._request("DELETE", f"/api/sections/{section_id}")
        except httpx.HTTPError:
            draft.draft = previous
            raise
        draft.confirm_removal(section_id)
