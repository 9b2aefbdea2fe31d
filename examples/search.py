import asyncio

from tlyrics import search
from tlyrics.app_logging import setup_logging


async def main() -> None:
    for track in await search("slow dancing in the dark"):
        print(f"{track.id}: {track.artist_name} - {track.track_name} ({track.album_name})")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
