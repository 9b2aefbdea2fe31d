# core/synced_lyrics.py
from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .errors import LyricsParseError, LyricsRangeError
from .models import MUSIC_INDICATOR, LyricLine, Timestamp
from .utils import strip_timestamps

# [mm:ss.ff] text -- the whitespace after the tag must not run into the next line
_LINE_RE = re.compile(r"\[(\d+):(\d+)\.(\d+)\][^\S\n]*(.*)")


def _parse_uint(digits: str) -> int:
    # \d also matches non-ASCII digits, which int() would quietly accept
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an ASCII decimal integer: {digits!r}")
    return int(digits)


@dataclass(frozen=True)
class SyncedLyrics:
    """
    Raw synced lyrics as returned by LRCLIB (``syncedLyrics``).

    Nothing is cached: every query parses ``raw`` again.
    """

    raw: str

    def pieces(self) -> List[LyricLine]:
        """
        Parse the raw text into (timestamp, text) pairs, in source order.

        The fraction after the dot is stored as milliseconds verbatim, so
        ``[00:01.5]`` gives ``milliseconds=5``. Blank lines become
        ``MUSIC_INDICATOR``. A numeric field that is not an ASCII decimal
        integer (e.g. Arabic-Indic digits) fails the whole call with
        ``LyricsParseError``.
        """
        lines: List[LyricLine] = []
        for m in _LINE_RE.finditer(self.raw):
            mm, ss, frac, text = m.groups()
            try:
                ts = Timestamp(_parse_uint(mm), _parse_uint(ss), _parse_uint(frac))
            except ValueError as e:
                raise LyricsParseError(f"Invalid timestamp [{mm}:{ss}.{frac}]: {e}") from e

            if not text.strip():
                text = MUSIC_INDICATOR
            lines.append(LyricLine(ts, text))
        return lines

    def at(self, timestamp: Timestamp) -> LyricLine:
        """
        Line reached by accumulating per-line timestamps until ``timestamp``.

        The running total adds each line's own ``total_seconds()`` (not the
        gap to the previous line) and the line *after* the last one added is
        returned. Use ``current_line`` for a plain position lookup.
        """
        pieces = self.pieces()
        target = timestamp.total_seconds()
        elapsed = 0.0
        i = 0

        while elapsed < target:
            if i >= len(pieces):
                raise LyricsRangeError(
                    f"No lyric line at {timestamp} (accumulated {elapsed}s over {len(pieces)} lines)"
                )
            elapsed += pieces[i].total_seconds()
            i += 1

        if i >= len(pieces):
            raise LyricsRangeError(f"No lyric line at {timestamp} ({len(pieces)} lines)")
        return pieces[i]

    def current_line(self, position: Union[Timestamp, float]) -> Optional[LyricLine]:
        """Last line whose timestamp is at or before ``position``, or None."""
        if isinstance(position, Timestamp):
            position = position.total_seconds()

        pieces = self.pieces()
        times = [p.total_seconds() for p in pieces]
        idx = bisect.bisect_right(times, position) - 1
        return pieces[idx] if idx >= 0 else None

    def deltas(self, include_initial: bool = False) -> List[float]:
        """
        Gaps in seconds between consecutive lines.

        With ``include_initial`` the first element is the wait before the first
        line (e.g. an instrumental prelude).
        """
        times = [p.total_seconds() for p in self.pieces()]
        if not times:
            return []

        deltas = [times[0]] if include_initial else []
        deltas.extend(b - a for a, b in zip(times, times[1:]))
        return deltas

    def to_plain(self) -> str:
        return strip_timestamps(self.raw)
