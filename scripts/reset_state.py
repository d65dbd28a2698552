import asyncio
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import load_settings  # noqa: E402
from infrastructure.database.database import Database  # noqa: E402

logger = logging.getLogger("reset_state")


async def reset_database() -> None:
    settings = load_settings()
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        logger.info("Dropping database tables...")
        await database.drop_tables()

        logger.info("Recreating database tables...")
        await database.create_tables()
    finally:
        await database.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(reset_database())
    logger.info("Database reset complete.")


if __name__ == "__main__":
    main()
