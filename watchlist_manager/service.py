"""Watchlist service composing validation, storage, edit state and projections."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from .models import Entry, EntryDraft, ErrorKind, NoticeKind
from .notify import Notifier, log_notifier
from .projector import DEFAULT_TRACKED_STATUSES, Counts, WatchlistView, counts, present
from .session import EditorSession
from .storage import WatchlistStore
from .validator import validate

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

REMOVE_PROMPT = "Are you sure you want to remove this movie from your watchlist?"


class ValidationError(Exception):
    """A submitted draft failed validation; nothing was changed."""

    def __init__(self, kind: ErrorKind):
        super().__init__(kind.message)
        self.kind = kind

    @property
    def field(self) -> str:
        return self.kind.field


class EntryNotFoundError(LookupError):
    def __init__(self, index: int):
        super().__init__(f"No watchlist entry at position {index}")
        self.index = index


def _always_confirm(message: str) -> bool:
    return True


class WatchlistService:
    """Owns the entry store and the editor session for one user.

    Every public operation runs under one lock and completes its
    validate, mutate, save and render steps before the next one starts.
    """

    def __init__(
        self,
        store: WatchlistStore,
        notify: Optional[Notifier] = None,
        confirm: Optional[Confirm] = None,
        view: Optional[Any] = None,
        tracked_statuses: Sequence[str] = DEFAULT_TRACKED_STATUSES,
    ):
        self.store = store
        self.session = EditorSession()
        self.notify: Notifier = notify or log_notifier
        self.confirm: Confirm = confirm or _always_confirm
        self.view = view
        self.tracked_statuses = tuple(tracked_statuses)
        self._lock = RLock()
        self.app = None

    def init_app(self, app):
        self.app = app
        app.extensions["watchlist_service"] = self

    # -- reads -----------------------------------------------------------
    @property
    def entries(self) -> List[Entry]:
        return self.store.entries

    @property
    def editing_index(self) -> Optional[int]:
        with self._lock:
            return self.session.editing_index(self.store.entries)

    def counts(self) -> Counts:
        with self._lock:
            return counts(self.store.entries, self.tracked_statuses)

    def view_model(self) -> WatchlistView:
        with self._lock:
            entries = self.store.entries
            return present(entries, self.session.editing_index(entries))

    # -- lifecycle -------------------------------------------------------
    def load(self) -> List[Entry]:
        with self._lock:
            entries = self.store.load()
            self.session.cancel()
            logger.info("Loaded %d watchlist entries", len(entries))
            self._render()
            return entries

    def submit(self, form: Union[EntryDraft, Mapping[str, Any]]) -> Entry:
        """Validate the form and add or update an entry.

        Raises ``ValidationError`` when a check fails; the collection and
        the editor session are left as they were.
        """
        draft = EntryDraft.from_form(form.to_dict() if isinstance(form, EntryDraft) else form)
        with self._lock:
            entries = self.store.entries
            editing_index = self.session.editing_index(entries)
            error = validate(draft, editing_index, entries)
            if error is not None:
                self.notify(error.message, NoticeKind.ERROR)
                raise ValidationError(error)

            entry = self.session.commit(draft, self.store)
            self.store.save()
            if editing_index is None:
                logger.info("Added entry %s (%s)", entry.id, entry.title)
                message = "Movie added to your watchlist!"
            else:
                logger.info("Updated entry %s (%s)", entry.id, entry.title)
                message = "Movie updated successfully!"
            self._render()
            self.notify(message, NoticeKind.INFO)
            return entry

    def begin_edit(self, index: int) -> Entry:
        with self._lock:
            try:
                entry = self.session.begin_edit(index, self.store.entries)
            except IndexError:
                raise EntryNotFoundError(index) from None
            self._render()
            self.notify("Editing mode activated. Make your changes and click Update Movie.", NoticeKind.INFO)
            return entry

    def cancel_edit(self) -> None:
        with self._lock:
            self.session.cancel()
            self._render()
            self.notify("Edit mode cancelled", NoticeKind.INFO)

    def remove(self, index: int, confirm: Optional[Confirm] = None) -> Optional[Entry]:
        """Remove the entry at ``index`` once the user confirms.

        Returns the removed entry, or None when the confirmation was
        declined.
        """
        with self._lock:
            if not 0 <= index < len(self.store):
                raise EntryNotFoundError(index)
            if not (confirm or self.confirm)(REMOVE_PROMPT):
                return None

            removed = self.store.remove_at(index)
            if self.session.entry_id == removed.id:
                self.session.cancel()
            self.store.save()
            logger.info("Removed entry %s (%s)", removed.id, removed.title)
            self._render()
            self.notify(f'"{removed.title}" has been removed from your watchlist', NoticeKind.INFO)
            return removed

    def _render(self) -> None:
        if self.view is not None:
            self.view.render(self.view_model())
