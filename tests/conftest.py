"""
Pytest configuration for the watchlist tests.

Provides in-memory stores, a service wired to recording collaborators and
a Flask test client.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from watchlist_manager.models import EntryDraft  # noqa: E402
from watchlist_manager.notify import AlertBoard  # noqa: E402
from watchlist_manager.service import WatchlistService  # noqa: E402
from watchlist_manager.storage import MemoryBackend, WatchlistStore  # noqa: E402


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def __call__(self, message, kind):
        self.messages.append((message, kind))

    @property
    def last(self):
        return self.messages[-1] if self.messages else None


class RecordingView:
    def __init__(self):
        self.renders = []

    def render(self, view):
        self.renders.append(view)


def make_draft(title="Dune", status="watching", genre="sci-fi", **extra):
    data = {"title": title, "status": status, "genre": genre}
    data.update(extra)
    return EntryDraft.from_form(data)


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return WatchlistStore(backend, key="movies")


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def service(store, notifier, view):
    return WatchlistService(store, notify=notifier, view=view)


@pytest.fixture
def client(store):
    from app import create_app

    alerts = AlertBoard(timeout=0)
    service = WatchlistService(store, notify=alerts)
    app = create_app(service=service, alerts=alerts)
    app.config["TESTING"] = True
    return app.test_client()
