# core/utils.py
from __future__ import annotations

import re

_LEADING_TAG_RE = re.compile(r"^\[.*?\]\s*")


def strip_timestamp(line: str) -> str:
    """
    Remove every leading tag of the form [00:00.00] (or [ar: ...]) from one line.
    """
    prev = None
    while prev != line:
        prev = line
        line = _LEADING_TAG_RE.sub("", line, count=1)
    return line


def strip_timestamps(lrc: str) -> str:
    # plain lyrics = synced lyrics minus the [mm:ss.xx] tags
    return "\n".join(strip_timestamp(line) for line in lrc.splitlines()).strip()
