"""
tlyrics - LRCLIB client with a synced-lyrics time model.

    >>> import asyncio
    >>> from tlyrics import get_by_id
    >>> track = asyncio.run(get_by_id(5432440))
    >>> track.synced_lyrics.deltas(include_initial=True)
"""

from .core import __version__

from .core.async_client import AsyncLrcLibClient, get_by_id, search
from .core.config import ClientConfig
from .core.errors import LyricsParseError, LyricsRangeError, TLyricsError, TrackDecodeError
from .core.lrclib_client import LrcLibClient
from .core.models import MUSIC_INDICATOR, LyricLine, Timestamp
from .core.synced_lyrics import SyncedLyrics
from .core.track import Track

__all__ = [
    "AsyncLrcLibClient",
    "ClientConfig",
    "LrcLibClient",
    "LyricLine",
    "LyricsParseError",
    "LyricsRangeError",
    "MUSIC_INDICATOR",
    "SyncedLyrics",
    "TLyricsError",
    "Timestamp",
    "Track",
    "TrackDecodeError",
    "get_by_id",
    "search",
]
