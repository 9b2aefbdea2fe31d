# core/errors.py
from __future__ import annotations


class TLyricsError(Exception):
    """Base class for errors raised by tlyrics itself (not by the transport)."""


class LyricsParseError(TLyricsError, ValueError):
    """A numeric field of a synced-lyrics timestamp is not a valid integer."""


class LyricsRangeError(TLyricsError, IndexError):
    """A lookup walked outside the parsed lyric lines."""


class TrackDecodeError(TLyricsError, ValueError):
    """The response payload does not have the shape of a track record."""
