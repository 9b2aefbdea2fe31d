# core/lrclib_client.py
from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .config import ClientConfig
from .track import Track

logger = logging.getLogger(__name__)


class LrcLibClient:
    """Blocking LRCLIB client. Transport errors propagate as ``requests`` exceptions."""

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url
        self.session = requests.Session()
        self.session.headers.update(self.config.request_headers())

    def __enter__(self) -> "LrcLibClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str, params: dict | None = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        return self.session.get(url, params=params, timeout=self.config.timeout)

    def get_by_id(self, track_id: int) -> Track:
        # LRCLIB: GET /api/get/{id}
        r = self._get(f"/api/get/{int(track_id)}")
        r.raise_for_status()
        return Track.from_json(r.json())

    def search(self, query: str) -> List[Track]:
        # LRCLIB: GET /api/search?q=...
        r = self._get("/api/search", params={"q": query})
        r.raise_for_status()
        tracks = Track.list_from_json(r.json())
        logger.debug("search %r -> %d tracks", query, len(tracks))
        return tracks

    def get_by_metadata(
        self,
        track_name: str,
        artist_name: str,
        album_name: str | None = None,
        duration: float | None = None,
    ) -> Optional[Track]:
        # LRCLIB: GET /api/get?track_name=&artist_name=&album_name=&duration=
        r = self._get("/api/get", params=metadata_params(track_name, artist_name, album_name, duration))
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return Track.from_json(r.json())


def metadata_params(
    track_name: str,
    artist_name: str,
    album_name: str | None = None,
    duration: float | None = None,
) -> dict:
    params = {
        "track_name": track_name,
        "artist_name": artist_name,
    }
    if album_name:
        params["album_name"] = album_name
    # server matches duration in whole seconds
    if duration and duration > 0:
        params["duration"] = int(round(duration))
    return params
