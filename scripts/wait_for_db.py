"""Wait for the database to accept queries, then exec the given command.

Usage: python scripts/wait_for_db.py [--timeout SECONDS] -- uvicorn app.main:app
"""
import argparse
import asyncio
import logging
import os
import sys
from typing import List

# Add app to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.core.database import Database

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("wait_for_db")

POLL_INTERVAL_SECONDS = 2.0


async def wait_for_database(database: Database, timeout: float, interval: float = POLL_INTERVAL_SECONDS) -> bool:
    """Poll the store until it answers or timeout seconds pass (0 waits forever)."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout if timeout > 0 else None

    while not await database.ping():
        if deadline is not None and loop.time() >= deadline:
            return False
        logger.info("Database is unavailable - sleeping")
        await asyncio.sleep(interval)
    return True


def command_to_exec(argv: List[str]) -> List[str]:
    """Drop the leading "--" separator, keeping any later ones for the wrapped command."""
    if argv and argv[0] == "--":
        return argv[1:]
    return list(argv)


async def main(timeout: float) -> bool:
    database = Database(settings.database_url)
    logger.info(f"Waiting for database at {settings.DB_HOST}:{settings.DB_PORT}...")
    try:
        return await wait_for_database(database, timeout)
    finally:
        await database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--timeout", type=float, default=0, help="Give up after this many seconds (0 = never)")
    parser.add_argument("command", nargs=argparse.REMAINDER)
    args = parser.parse_args()

    if not asyncio.run(main(args.timeout)):
        logger.error("Database connection failed")
        sys.exit(1)

    logger.info("Database is up")
    command = command_to_exec(args.command)
    if command:
        logger.info(f"Executing: {' '.join(command)}")
        os.execvp(command[0], command)
