"""Print one page of the Polytoria rankings.

Reads the PT_AUTH cookie from POLYTORIA_PT_AUTH_COOKIE (or a .env file).

Usage:
    python scripts/print_leaderboard.py [category] [page]
"""

import asyncio
import sys

from polytoria_api import PolytoriaClient, configure_logging, get_logger
from polytoria_api.schemas import LeaderboardCategory

logger = get_logger(__name__)


async def print_leaderboard(category: LeaderboardCategory, page: int) -> None:
    """Fetch a rankings page and print it."""
    async with PolytoriaClient() as client:
        entries = await client.get_leaderboard(category, page)

    for entry in entries:
        print(f"{entry.rank:>4}  {entry.username:<24} {entry.statistic}")

    logger.info("Leaderboard printed", category=category.value, page=page, entries=len(entries))


if __name__ == "__main__":
    configure_logging()
    category = LeaderboardCategory(sys.argv[1]) if len(sys.argv) > 1 else LeaderboardCategory.NETWORTH
    page = int(sys.argv[2]) if len(sys.argv) > 2 else 1
    asyncio.run(print_leaderboard(category, page))
