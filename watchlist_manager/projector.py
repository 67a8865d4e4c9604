"""Read-only projections of the watchlist: statistics and view-model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .models import Entry

DEFAULT_TRACKED_STATUSES = ("watching", "completed", "on-hold")

EMPTY_TITLE = "No movies in your watchlist yet"
EMPTY_HINT = "Add your first movie above to get started!"
NO_IMAGE_TEXT = "No Image Available"


@dataclass
class Counts:
    total: int
    per_status: Dict[str, int]

    def to_dict(self) -> Dict[str, int]:
        data = {"total": self.total}
        data.update(self.per_status)
        return data


def counts(entries: Sequence[Entry], statuses: Sequence[str] = DEFAULT_TRACKED_STATUSES) -> Counts:
    per_status = {status: 0 for status in statuses}
    for entry in entries:
        if entry.status in per_status:
            per_status[entry.status] += 1
    return Counts(total=len(entries), per_status=per_status)


def status_label(status: str) -> str:
    return status.replace("-", " ")


@dataclass
class EntryCard:
    index: int
    entry: Entry
    is_editing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = self.entry.to_dict()
        data.update({
            "index": self.index,
            "statusLabel": status_label(self.entry.status),
            "hasImage": bool(self.entry.image),
            "imageFallback": NO_IMAGE_TEXT,
            "isEditing": self.is_editing,
        })
        return data


@dataclass
class FormState:
    editing_index: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_index is not None

    @property
    def heading(self) -> str:
        return "Edit Movie" if self.is_editing else "Add New Movie"

    @property
    def submit_label(self) -> str:
        return "Update Movie" if self.is_editing else "Add Movie"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": "edit" if self.is_editing else "create",
            "editingIndex": self.editing_index,
            "heading": self.heading,
            "submitLabel": self.submit_label,
            "showCancel": self.is_editing,
        }


@dataclass
class WatchlistView:
    cards: List[EntryCard] = field(default_factory=list)
    form: FormState = field(default_factory=FormState)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "entries": [card.to_dict() for card in self.cards],
            "form": self.form.to_dict(),
            "isEmpty": self.is_empty,
        }
        if self.is_empty:
            data["emptyState"] = {"title": EMPTY_TITLE, "hint": EMPTY_HINT}
        return data


def present(entries: Sequence[Entry], editing_index: Optional[int] = None) -> WatchlistView:
    """Map entries to display cards, keeping collection order and positions."""
    cards = [
        EntryCard(index=index, entry=entry, is_editing=index == editing_index)
        for index, entry in enumerate(entries)
    ]
    return WatchlistView(cards=cards, form=FormState(editing_index=editing_index))
