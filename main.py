import argparse
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import requests

from tlyrics import MUSIC_INDICATOR, ClientConfig, LrcLibClient, TLyricsError, Track
from tlyrics.app_logging import setup_logging


def format_track_row(track: Track) -> str:
    return (
        f"{track.id:>9}  {track.artist_name} - {track.track_name} "
        f"({track.album_name}) [{track.lyrics_state}]"
    )


def print_track(track: Track) -> None:
    minutes, seconds = divmod(int(track.duration), 60)
    print(f"id:           {track.id}")
    print(f"track:        {track.track_name}")
    print(f"artist:       {track.artist_name}")
    print(f"album:        {track.album_name}")
    print(f"duration:     {minutes}:{seconds:02d}")
    print(f"instrumental: {track.instrumental}")
    print(f"lyrics:       {track.lyrics_state}")
    if track.plain_lyrics:
        print()
        print(track.plain_lyrics)


def cmd_get(client: LrcLibClient, args) -> int:
    print_track(client.get_by_id(args.id))
    return 0


def cmd_search(client: LrcLibClient, args) -> int:
    tracks = client.search(args.query)
    if not tracks:
        print("No results.")
        return 0
    for track in tracks:
        print(format_track_row(track))
    return 0


def cmd_sync(client: LrcLibClient, args) -> int:
    track = client.get_by_id(args.id)
    if track.synced_lyrics is None:
        print(f"No synced lyrics for '{track.track_name}'.", file=sys.stderr)
        return 1

    lyrics = track.synced_lyrics
    if args.at is not None:
        line = lyrics.current_line(args.at)
        print(f"[{line.timestamp}] {line.text}" if line else MUSIC_INDICATOR)
        return 0

    if args.play:
        print(MUSIC_INDICATOR, flush=True)
        for (_ts, text), delta in zip(lyrics.pieces(), lyrics.deltas(include_initial=True)):
            time.sleep(max(0.0, delta))
            print(text, flush=True)
        return 0

    for ts, text in lyrics.pieces():
        print(f"[{ts}] {text}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tlyrics", description="Query LRCLIB for tracks and lyrics.")
    parser.add_argument("--base-url", help="LRCLIB instance (default: $TLYRICS_BASE_URL or https://lrclib.net)")
    parser.add_argument("--log-level", help="DEBUG/INFO/WARNING/ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    p_get = sub.add_parser("get", help="show a track by id")
    p_get.add_argument("id", type=int)
    p_get.set_defaults(func=cmd_get)

    p_search = sub.add_parser("search", help="search tracks")
    p_search.add_argument("query")
    p_search.set_defaults(func=cmd_search)

    p_sync = sub.add_parser("sync", help="show synced lyrics of a track")
    p_sync.add_argument("id", type=int)
    group = p_sync.add_mutually_exclusive_group()
    group.add_argument("--at", type=float, metavar="SECONDS", help="print the line playing at this position")
    group.add_argument("--play", action="store_true", help="print lines in real time")
    p_sync.set_defaults(func=cmd_sync)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = ClientConfig.from_env()
    if args.base_url:
        config = ClientConfig(base_url=args.base_url, user_agent=config.user_agent, timeout=config.timeout)

    try:
        with LrcLibClient(config) as client:
            return args.func(client, args)
    except (requests.RequestException, TLyricsError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
