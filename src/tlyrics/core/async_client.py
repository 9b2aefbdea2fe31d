# core/async_client.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

import aiohttp

from .config import ClientConfig
from .lrclib_client import metadata_params
from .track import Track

logger = logging.getLogger(__name__)


class AsyncLrcLibClient:
    """
    asyncio LRCLIB client.

    Every call opens its own ``aiohttp.ClientSession``. ``aiohttp.ClientError``
    and ``asyncio.TimeoutError`` reach the caller unchanged; there are no
    retries.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url
        self.timeout = aiohttp.ClientTimeout(total=self.config.timeout)

    async def _get_json(self, path: str, params: dict | None = None, allow_404: bool = False) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)

        async with aiohttp.ClientSession(headers=self.config.request_headers(), timeout=self.timeout) as session:
            async with session.get(url, params=params) as response:
                if allow_404 and response.status == 404:
                    return None
                response.raise_for_status()
                return await response.json()

    async def get_by_id(self, track_id: int) -> Track:
        data = await self._get_json(f"/api/get/{int(track_id)}")
        return Track.from_json(data)

    async def search(self, query: str) -> List[Track]:
        data = await self._get_json("/api/search", params={"q": query})
        tracks = Track.list_from_json(data)
        logger.debug("search %r -> %d tracks", query, len(tracks))
        return tracks

    async def get_by_metadata(
        self,
        track_name: str,
        artist_name: str,
        album_name: str | None = None,
        duration: float | None = None,
    ) -> Optional[Track]:
        data = await self._get_json(
            "/api/get",
            params=metadata_params(track_name, artist_name, album_name, duration),
            allow_404=True,
        )
        return Track.from_json(data) if data is not None else None


async def get_by_id(track_id: int) -> Track:
    """
    Get a track by its LRCLIB id.

        track = await get_by_id(5432440)
    """
    return await AsyncLrcLibClient(ClientConfig.from_env()).get_by_id(track_id)


async def search(query: str) -> List[Track]:
    """
    Search for tracks.

        results = await search("slow dancing in the dark")
    """
    return await AsyncLrcLibClient(ClientConfig.from_env()).search(query)
