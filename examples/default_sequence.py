# examples/default_sequence.py
import asyncio

from loguru import logger

from mongo_sequence import DEFAULT_SEQUENCE_NAME, next_val, setup_default_sequence, setup_logging
from mongo_sequence.db.database import connect_db


async def main():
    """Hand out values from the default sequence (collection 'sequences')."""
    setup_logging()
    try:
        client, db = await connect_db()
    except Exception as e:
        logger.error(f"Error connecting to database: {e}")
        return

    try:
        setup_default_sequence(db, timeout=30)
        for _ in range(3):
            value = await next_val(DEFAULT_SEQUENCE_NAME)
            print(f"value is: {value}") # 1, 2, 3 on a fresh database
        value = await next_val("orderSeq")
        print(f"value is: {value}") # 1
    finally:
        client.close()
        logger.info("Database connection closed.")


if __name__ == "__main__":
    asyncio.run(main())
