"""
Tests for the alert board notifier.
"""

from watchlist_manager.models import NoticeKind
from watchlist_manager.notify import AlertBoard


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_latest_notice_replaces_previous():
    board = AlertBoard(timeout=5, clock=FakeClock())
    board("first", NoticeKind.INFO)
    board("second", NoticeKind.ERROR)

    assert board.latest().to_dict() == {"message": "second", "kind": "error"}


def test_notice_expires_after_timeout():
    clock = FakeClock()
    board = AlertBoard(timeout=5, clock=clock)
    board("Movie added to your watchlist!", NoticeKind.INFO)

    clock.now += 4
    assert board.latest() is not None
    clock.now += 2
    assert board.latest() is None


def test_zero_timeout_keeps_notice():
    clock = FakeClock()
    board = AlertBoard(timeout=0, clock=clock)
    board("kept", NoticeKind.INFO)
    clock.now += 3600
    assert board.latest().message == "kept"


def test_clear():
    board = AlertBoard()
    board("gone", NoticeKind.INFO)
    board.clear()
    assert board.latest() is None
