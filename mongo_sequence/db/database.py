# mongo_sequence/db/database.py
import logging
from typing import Optional, Tuple

import motor.motor_asyncio
from beanie import init_beanie

from mongo_sequence.core.config import MONGODB_URL, DATABASE_NAME
from mongo_sequence.models.counter import SequenceCounter

logger = logging.getLogger(__name__)


async def connect_db(
    url: Optional[str] = None,
    database_name: Optional[str] = None,
) -> Tuple[motor.motor_asyncio.AsyncIOMotorClient, motor.motor_asyncio.AsyncIOMotorDatabase]:
    """Connect to MongoDB and verify the server answers a ping.

    The caller owns the returned client and must close it.
    """
    url = url or MONGODB_URL
    database_name = database_name or DATABASE_NAME
    logger.info("Connecting to MongoDB...")
    client = motor.motor_asyncio.AsyncIOMotorClient(url)
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise

    database = client[database_name]
    logger.info(f"Using database: {database_name}")
    return client, database


async def init_counter_models(database) -> None:
    """Register SequenceCounter with beanie so a DocumentModelStore can use it."""
    await init_beanie(database=database, document_models=[SequenceCounter])
    logger.info("Beanie initialization complete for SequenceCounter.")
