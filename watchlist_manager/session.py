"""Create-versus-edit state of the watchlist form."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import Entry, EntryDraft
from .storage import WatchlistStore


class EditorSession:
    """Tracks which entry, if any, the form is editing.

    The session remembers the entry id rather than its position, so the
    position is always resolved against the current collection: removing an
    earlier entry shifts the edited index down by one, and removing the
    edited entry itself drops the session back to idle.
    """

    def __init__(self) -> None:
        self._entry_id: Optional[int] = None

    @property
    def is_editing(self) -> bool:
        return self._entry_id is not None

    @property
    def entry_id(self) -> Optional[int]:
        return self._entry_id

    def editing_index(self, entries: Sequence[Entry]) -> Optional[int]:
        """Current position of the edited entry, or None when idle."""
        if self._entry_id is None:
            return None
        for index, entry in enumerate(entries):
            if entry.id == self._entry_id:
                return index
        # The edited entry is gone.
        self._entry_id = None
        return None

    def begin_edit(self, index: int, entries: Sequence[Entry]) -> Entry:
        if not 0 <= index < len(entries):
            raise IndexError(f"watchlist index {index} out of range")
        entry = entries[index]
        self._entry_id = entry.id
        return entry

    def cancel(self) -> None:
        self._entry_id = None

    def commit(self, candidate: EntryDraft, store: WatchlistStore) -> Entry:
        """Write a validated draft into the store and return to idle.

        When idle the draft becomes a new entry with a fresh id and
        ``date_added``; when editing it replaces the edited entry, keeping
        its id and ``date_added``.
        """
        index = self.editing_index(store.entries)
        if index is None:
            entry = Entry.create(store.next_id(), candidate)
            store.append(entry)
        else:
            original = store.get(index)
            entry = Entry.create(original.id, candidate, date_added=original.date_added)
            store.replace_at(index, entry)
        self._entry_id = None
        return entry

    def draft_for_edit(self, store: WatchlistStore) -> Optional[EntryDraft]:
        """Form values to pre-populate while editing."""
        index = self.editing_index(store.entries)
        if index is None:
            return None
        return EntryDraft.from_entry(store.get(index))
