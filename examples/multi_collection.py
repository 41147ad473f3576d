# examples/multi_collection.py
import asyncio

from loguru import logger

from mongo_sequence import Sequence, setup_logging
from mongo_sequence.db.database import connect_db


async def main():
    """Two collections, two independent sets of counters with the same names."""
    setup_logging()
    try:
        client, db = await connect_db()
    except Exception as e:
        logger.error(f"Error connecting to database: {e}")
        return

    try:
        my_app_seq = Sequence.from_database(db, "myApp", timeout=30)
        my_other_app_seq = Sequence(db["myOtherApp"], timeout=30)

        print(f"myApp mySeq: {await my_app_seq.next_val('mySeq')}")               # 1
        print(f"myApp orderSeq: {await my_app_seq.next_val('orderSeq')}")         # 1
        print(f"myApp mySeq: {await my_app_seq.next_val('mySeq')}")               # 2
        print(f"myOtherApp mySeq: {await my_other_app_seq.next_val('mySeq')}")    # 1

        record = await my_app_seq.peek("mySeq")
        print(f"stored record: {record}") # name='mySeq' value=3
    finally:
        client.close()
        logger.info("Database connection closed.")


if __name__ == "__main__":
    asyncio.run(main())
