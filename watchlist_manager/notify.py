"""User-visible feedback channels."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Dict, Optional

from .models import NoticeKind

logger = logging.getLogger(__name__)

Notifier = Callable[[str, NoticeKind], None]


def log_notifier(message: str, kind: NoticeKind) -> None:
    if kind == NoticeKind.ERROR:
        logger.warning(message)
    else:
        logger.info(message)


@dataclass
class Notice:
    message: str
    kind: NoticeKind
    created_at: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "kind": self.kind.value}


class AlertBoard:
    """Holds the most recent notice; each new notice replaces the last."""

    def __init__(self, timeout: float = 5.0, clock: Callable[[], float] = time.time) -> None:
        self.timeout = timeout
        self._clock = clock
        self._lock = Lock()
        self._notice: Optional[Notice] = None

    def __call__(self, message: str, kind: NoticeKind) -> None:
        with self._lock:
            self._notice = Notice(message=message, kind=kind, created_at=self._clock())
        log_notifier(message, kind)

    def latest(self) -> Optional[Notice]:
        with self._lock:
            notice = self._notice
            if notice and self.timeout and self._clock() - notice.created_at > self.timeout:
                self._notice = None
                return None
            return notice

    def clear(self) -> None:
        with self._lock:
            self._notice = None
