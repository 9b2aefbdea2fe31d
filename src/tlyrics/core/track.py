# core/track.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .errors import TrackDecodeError
from .synced_lyrics import SyncedLyrics


def _require(data: dict, key: str, kind: type | tuple, label: str):
    if key not in data or data[key] is None:
        raise TrackDecodeError(f"Missing field '{key}'")
    value = data[key]
    # bool is an int subclass; never accept it where a number is expected
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise TrackDecodeError(f"Field '{key}' must be {label}, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TrackDecodeError(f"Field '{key}' must be a string or null, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Track:
    id: int
    track_name: str
    artist_name: str
    album_name: str
    duration: float  # seconds
    instrumental: bool
    plain_lyrics: Optional[str] = None
    synced_lyrics: Optional[SyncedLyrics] = None

    @staticmethod
    def from_json(data: Any) -> "Track":
        # LRCLIB record: id, trackName, artistName, albumName, duration,
        # instrumental, plainLyrics?, syncedLyrics?
        if not isinstance(data, dict):
            raise TrackDecodeError(f"Expected a JSON object, got {type(data).__name__}")

        track_id = _require(data, "id", int, "an integer")
        if track_id < 0:
            raise TrackDecodeError(f"Field 'id' must be non-negative, got {track_id}")

        synced = _optional_str(data, "syncedLyrics")

        return Track(
            id=track_id,
            track_name=_require(data, "trackName", str, "a string"),
            artist_name=_require(data, "artistName", str, "a string"),
            album_name=_require(data, "albumName", str, "a string"),
            duration=float(_require(data, "duration", (int, float), "a number")),
            instrumental=_require(data, "instrumental", bool, "a boolean"),
            plain_lyrics=_optional_str(data, "plainLyrics"),
            synced_lyrics=SyncedLyrics(synced) if synced is not None else None,
        )

    @staticmethod
    def list_from_json(data: Any) -> List["Track"]:
        if not isinstance(data, list):
            raise TrackDecodeError(f"Expected a JSON array, got {type(data).__name__}")
        return [Track.from_json(item) for item in data]

    @property
    def lyrics_state(self) -> str:
        # synced/plain/instrumental/none
        if self.instrumental:
            return "instrumental"
        if self.synced_lyrics is not None:
            return "synced"
        if self.plain_lyrics is not None:
            return "plain"
        return "none"
