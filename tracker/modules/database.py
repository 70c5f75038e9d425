import logging
import os
from typing import Optional

from databases import Database
from dotenv import load_dotenv
from sqlalchemy.schema import CreateIndex, CreateTable

load_dotenv()

logger = logging.getLogger("tracker.database")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tracker.db")

# Create the database instance
database = Database(DATABASE_URL)


async def connect_to_db():
    if not database.is_connected:
        await database.connect()
        logger.info("Database connection established")


async def disconnect_from_db():
    if database.is_connected:
        await database.disconnect()
        logger.info("Database connection closed")


async def init_db(db: Optional[Database] = None):
    """
    Create every table declared in the shared metadata if it is missing.

    Args:
        db: Optional database instance. Defaults to the module-level one.
    """
    from tracker.modules.users.repositories.tables import metadata

    db = db or database
    for table in metadata.sorted_tables:
        await db.execute(CreateTable(table, if_not_exists=True))
        for index in table.indexes:
            await db.execute(CreateIndex(index, if_not_exists=True))
        logger.debug(f"[init_db] ensured table {table.name}")


async def health_check(db: Optional[Database] = None) -> bool:
    """
    Check if database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    db = db or database
    try:
        if not db.is_connected:
            return False
        await db.fetch_val("SELECT 1")
        return True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False


def get_database() -> Database:
    """FastAPI dependency returning the shared database instance."""
    return database
