"""Data models for the watchlist."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorKind(str, Enum):
    """Recoverable input errors reported back to the form."""

    MISSING_TITLE = "missing_title"
    MISSING_STATUS = "missing_status"
    MISSING_GENRE = "missing_genre"
    DUPLICATE_TITLE = "duplicate_title"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

    @property
    def field(self) -> str:
        """Form field that should receive focus."""
        return _ERROR_FIELDS[self]


_ERROR_MESSAGES = {
    ErrorKind.MISSING_TITLE: "Please enter a movie title",
    ErrorKind.MISSING_STATUS: "Please select a status",
    ErrorKind.MISSING_GENRE: "Please select a genre",
    ErrorKind.DUPLICATE_TITLE: "A movie with this title already exists in your watchlist",
}

_ERROR_FIELDS = {
    ErrorKind.MISSING_TITLE: "title",
    ErrorKind.MISSING_STATUS: "status",
    ErrorKind.MISSING_GENRE: "genre",
    ErrorKind.DUPLICATE_TITLE: "title",
}


class NoticeKind(str, Enum):
    INFO = "info"
    ERROR = "error"


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if value is None:
        raise ValueError(f"{key} is null")
    return str(value)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class EntryDraft:
    """Candidate values coming from the add/edit form."""

    title: str
    status: str
    genre: str
    image: Optional[str] = None
    season: Optional[str] = None
    episode: Optional[str] = None

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "EntryDraft":
        return cls(
            title=str(data.get("title") or "").strip(),
            status=str(data.get("status") or "").strip(),
            genre=str(data.get("genre") or "").strip(),
            image=_optional_text(data.get("image")),
            season=_optional_text(data.get("season")),
            episode=_optional_text(data.get("episode")),
        )

    @classmethod
    def from_entry(cls, entry: "Entry") -> "EntryDraft":
        return cls(
            title=entry.title,
            status=entry.status,
            genre=entry.genre,
            image=entry.image,
            season=entry.season,
            episode=entry.episode,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Entry:
    """One movie or show on the watchlist."""

    id: int
    title: str
    status: str
    genre: str
    date_added: str
    image: Optional[str] = None
    season: Optional[str] = None
    episode: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "image": self.image,
            "title": self.title,
            "season": self.season,
            "episode": self.episode,
            "status": self.status,
            "genre": self.genre,
            "dateAdded": self.date_added,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        """Build an entry from its persisted form.

        Raises ``KeyError``/``ValueError``/``TypeError`` when required fields
        are missing or malformed.
        """
        return cls(
            id=int(data["id"]),
            title=_required_text(data, "title"),
            status=_required_text(data, "status"),
            genre=_required_text(data, "genre"),
            date_added=_required_text(data, "dateAdded"),
            image=_optional_text(data.get("image")),
            season=_optional_text(data.get("season")),
            episode=_optional_text(data.get("episode")),
        )

    @classmethod
    def create(cls, entry_id: int, draft: EntryDraft, date_added: Optional[str] = None) -> "Entry":
        return cls(
            id=entry_id,
            title=draft.title.strip(),
            status=draft.status,
            genre=draft.genre,
            date_added=date_added or utc_timestamp(),
            image=draft.image,
            season=draft.season,
            episode=draft.episode,
        )
