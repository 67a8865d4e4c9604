"""Movie and show watchlist."""

from __future__ import annotations

from typing import Any, Optional

from config import Config

from .models import Entry, EntryDraft, ErrorKind, NoticeKind
from .notify import Notifier
from .service import Confirm, EntryNotFoundError, ValidationError, WatchlistService
from .storage import KeyValueBackend, WatchlistStore, create_backend


def create_service(
    backend: Optional[KeyValueBackend] = None,
    notify: Optional[Notifier] = None,
    confirm: Optional[Confirm] = None,
    view: Optional[Any] = None,
) -> WatchlistService:
    """Build a service from ``Config`` and load the persisted watchlist."""
    if backend is None:
        backend = create_backend(Config.WATCHLIST_BACKEND, path=Config.WATCHLIST_FILE, redis_url=Config.REDIS_URL)
    store = WatchlistStore(backend, key=Config.WATCHLIST_KEY)
    service = WatchlistService(
        store,
        notify=notify,
        confirm=confirm,
        view=view,
        tracked_statuses=Config.TRACKED_STATUSES,
    )
    service.load()
    return service


__all__ = [
    "Entry",
    "EntryDraft",
    "EntryNotFoundError",
    "ErrorKind",
    "NoticeKind",
    "ValidationError",
    "WatchlistService",
    "WatchlistStore",
    "create_service",
]
