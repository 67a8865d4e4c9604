"""Form validation run before any watchlist mutation."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import Entry, EntryDraft, ErrorKind


def validate(candidate: EntryDraft, editing_index: Optional[int], entries: Sequence[Entry]) -> Optional[ErrorKind]:
    """Return the first failing check, or None when the draft may be saved.

    The duplicate-title check only applies when adding (``editing_index`` is
    None). An edit may keep its own title, and renaming it to match another
    entry is accepted as well.
    """
    title = (candidate.title or "").strip()
    if not title:
        return ErrorKind.MISSING_TITLE

    if not candidate.status:
        return ErrorKind.MISSING_STATUS

    if not candidate.genre:
        return ErrorKind.MISSING_GENRE

    if editing_index is None and is_duplicate_title(title, entries):
        return ErrorKind.DUPLICATE_TITLE

    return None


def is_duplicate_title(title: str, entries: Sequence[Entry]) -> bool:
    wanted = title.strip().lower()
    return any(entry.title.lower() == wanted for entry in entries)
