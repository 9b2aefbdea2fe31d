"""Print the synced lyrics of a track in real time (sleeps between lines)."""
import asyncio

from tlyrics import MUSIC_INDICATOR, get_by_id
from tlyrics.app_logging import setup_logging


async def main() -> None:
    track = await get_by_id(5432440)
    if track.synced_lyrics is None:
        print(f"No synced lyrics for '{track.track_name}'.")
        return

    lyrics = track.synced_lyrics
    print(f"{track.artist_name} - {track.track_name}")
    print(MUSIC_INDICATOR)
    for (_ts, text), delta in zip(lyrics.pieces(), lyrics.deltas(include_initial=True)):
        await asyncio.sleep(max(0.0, delta))
        print(text, flush=True)


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
