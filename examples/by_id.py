import asyncio

from tlyrics import get_by_id
from tlyrics.app_logging import setup_logging


async def main() -> None:
    track = await get_by_id(5432440)
    print(track)


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
