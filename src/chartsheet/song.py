"""Song records as supplied by the songbook that owns them.

Storage lives outside this package; :class:`SongStore` only names the
operations a songbook offers.  The chart text of a song is handed to the
parser as-is and is never rewritten.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

_BPM_RE = re.compile(r"[0-9]+")


def slugify(title: str) -> str:
    """URL-friendly id for a song title: "Don't Stop" → "dont-stop"."""
    text = title.lower()
    text = re.sub(r"['‘’]", "", text)  # drop apostrophes
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def parse_bpm(tempo: str | None) -> int | None:
    """First run of digits in a tempo string: "80 BPM" → 80, "fast" → None."""
    if not tempo:
        return None
    m = _BPM_RE.search(tempo)
    return int(m.group()) if m else None


@dataclass
class Song:
    """A songbook entry.  Only text charts (``music_type == "text"``) are parsed."""

    title: str
    artist: str
    key: str | None = None
    tempo: str | None = None  # free text, e.g. "120bpm"
    music_type: str | None = None  # "pdf", "image" or "text"
    music_text: str | None = None
    is_favourite: bool = False
    is_xmas: bool = False

    @property
    def slug(self) -> str:
        return slugify(self.title)

    @property
    def bpm(self) -> int | None:
        return parse_bpm(self.tempo)

    @property
    def has_chart(self) -> bool:
        return self.music_type == "text" and bool(self.music_text)


class SongStore(ABC):
    """Abstract songbook storage.  Implemented by the host application."""

    @abstractmethod
    def get(self, song_id: str) -> Song | None:
        """Return the song stored under *song_id*, or None."""

    @abstractmethod
    def list_songs(self) -> list[Song]:
        """Return every stored song."""

    @abstractmethod
    def put(self, song: Song) -> None:
        """Create or replace *song* under its slug."""

    @abstractmethod
    def delete(self, song_id: str) -> None:
        """Remove the song stored under *song_id*."""
