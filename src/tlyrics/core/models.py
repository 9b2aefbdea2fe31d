# core/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

# shown for blank (instrumental) synced lines and before playback starts
MUSIC_INDICATOR = "♪"


@dataclass(frozen=True)
class Timestamp:
    minutes: int
    seconds: int
    milliseconds: int  # raw fraction digits from the LRC tag, not scaled

    def total_seconds(self) -> float:
        # whole seconds only: the millisecond part is integer-divided by 1000
        return float(self.minutes * 60 + self.seconds + self.milliseconds // 1000)

    @staticmethod
    def from_seconds(value: float) -> "Timestamp":
        total_ms = max(0, int(round(value * 1000)))
        minutes, rest = divmod(total_ms, 60_000)
        seconds, ms = divmod(rest, 1000)
        return Timestamp(minutes, seconds, ms)

    def __str__(self) -> str:
        # whole seconds, like total_seconds(); the fraction width is not kept
        return f"{self.minutes:02d}:{self.seconds:02d}"


class LyricLine(NamedTuple):
    timestamp: Timestamp
    text: str

    def total_seconds(self) -> float:
        return self.timestamp.total_seconds()
