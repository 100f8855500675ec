"""
Client-side draft buffer for the section editor.

The editor keeps two copies of a company's section list: `confirmed`,
the last list read from the server, and `draft`, where drag-and-drop
moves and optimistic toggles land first. Nothing reaches the server until
the draft is committed with a bulk reorder; after the commit the draft is
reconciled with a fresh read.

Sections are plain dicts shaped like SectionResponse JSON, so the buffer
works directly on API payloads.
"""
import copy
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")


def move_item(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """
    Move one element from from_index to to_index.

    The element is removed and re-inserted, so everything between the two
    positions shifts by one. Returns a new list; equal indices return an
    unchanged copy.

    Raises:
        IndexError: If either index is outside 0..len(items)-1
    """
    size = len(items)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise IndexError(f"Index {index} out of range for list of {size} items")

    moved = list(items)
    item = moved.pop(from_index)
    moved.insert(to_index, item)
    return moved


def assign_order_indices(sections: Sequence[dict]) -> list[dict]:
    """Return copies of sections whose order_index is their 0-based position."""
    return [
        {**section, "order_index": position}
        for position, section in enumerate(sections)
    ]


def sort_by_order(sections: Sequence[dict]) -> list[dict]:
    return sorted(sections, key=lambda section: section["order_index"])


class SectionDraft:
    """Speculative local edits on top of the confirmed server list."""

    def __init__(self, sections: Sequence[dict], version: Optional[int] = None):
        self.confirmed: list[dict] = sort_by_order(copy.deepcopy(list(sections)))
        self.draft: list[dict] = copy.deepcopy(self.confirmed)
        self.version = version

    @property
    def dirty(self) -> bool:
        """True when the draft order or fields differ from the confirmed list."""
        return self.draft != self.confirmed

    def index_of(self, section_id: Any) -> int:
        for position, section in enumerate(self.draft):
            if str(section["id"]) == str(section_id):
                return position
        raise KeyError(f"Section {section_id} is not in the draft")

    def move(self, from_index: int, to_index: int) -> list[dict]:
        """Drag a section to a new position and renumber the draft 0..N-1."""
        self.draft = assign_order_indices(move_item(self.draft, from_index, to_index))
        return self.draft

    def move_section(self, section_id: Any, over_id: Any) -> list[dict]:
        """Drop section_id onto the slot currently held by over_id."""
        if str(section_id) == str(over_id):
            return self.draft
        return self.move(self.index_of(section_id), self.index_of(over_id))

    def toggle_visibility(self, section_id: Any) -> dict:
        """Flip is_visible in the draft and return the updated section."""
        position = self.index_of(section_id)
        section = {**self.draft[position], "is_visible": not self.draft[position]["is_visible"]}
        self.draft[position] = section
        return section

    def remove(self, section_id: Any) -> dict:
        """Drop a section from the draft without renumbering the rest."""
        return self.draft.pop(self.index_of(section_id))

    def replace(self, section: dict) -> None:
        """Swap in a server-confirmed copy of one section in both buffers."""
        for buffer in (self.draft, self.confirmed):
            for position, existing in enumerate(buffer):
                if str(existing["id"]) == str(section["id"]):
                    buffer[position] = copy.deepcopy(section)

    def add(self, section: dict, version: Optional[int] = None) -> None:
        """Append a server-created section to the end of both buffers."""
        self.draft.append(copy.deepcopy(section))
        self.confirmed.append(copy.deepcopy(section))
        if version is not None:
            self.version = version

    def mark_committed(self, version: int) -> None:
        """The draft order is now the server's order at `version`."""
        self.confirmed = copy.deepcopy(self.draft)
        self.version = version

    def confirm_removal(self, section_id: Any) -> None:
        self.confirmed = [s for s in self.confirmed if str(s["id"]) != str(section_id)]

    def order_payload(self) -> list[dict]:
        """Body items for the bulk reorder call, in draft order."""
        return [
            {"id": str(section["id"]), "order_index": position}
            for position, section in enumerate(self.draft)
        ]

    def rollback(self) -> None:
        """Discard all speculative edits."""
        self.draft = copy.deepcopy(self.confirmed)

    def reconcile(self, sections: Sequence[dict], version: Optional[int] = None) -> None:
        """Adopt a fresh server read as both the confirmed and draft state."""
        self.confirmed = sort_by_order(copy.deepcopy(list(sections)))
        self.draft = copy.deepcopy(self.confirmed)
        if version is not None:
            self.version = version
