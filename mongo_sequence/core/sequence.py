# mongo_sequence/core/sequence.py
import asyncio
import logging
from typing import Any, Optional

from pymongo import ReturnDocument
from pymongo.errors import OperationFailure

from mongo_sequence.core.config import DEFAULT_COLLECTION_NAME, DEFAULT_TIMEOUT
from mongo_sequence.core.exceptions import CounterNotFoundError, NotIntegerValueError
from mongo_sequence.core.retry import RetryPolicy
from mongo_sequence.db.store import DatabaseStore, SequenceStore, as_store
from mongo_sequence.models.counter import CounterRecord, decode_value

logger = logging.getLogger(__name__)

# Server error code for $inc applied to a non-numeric field
TYPE_MISMATCH_CODE = 14


class Sequence:
    """Atomic named counters stored in one MongoDB collection.

    Every counter is a ``{"_id": name, "value": next}`` document. ``next_val``
    is a single ``findAndModify`` with ``$inc`` and ``upsert``; the server
    serialises updates per document, so concurrent callers in any number of
    processes never receive the same value and no client-side lock is needed.
    """

    def __init__(
        self,
        store: Any,
        timeout: Optional[float] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.store: SequenceStore = as_store(store)
        # Zero means "use the default", as does None
        self.timeout: float = timeout or DEFAULT_TIMEOUT
        self.retry_policy = retry_policy or RetryPolicy()

    @classmethod
    def from_database(
        cls,
        database: Any,
        collection_name: str = DEFAULT_COLLECTION_NAME,
        timeout: Optional[float] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "Sequence":
        return cls(DatabaseStore(database, collection_name), timeout, retry_policy)

    async def next_val(self, name: str) -> int:
        """Return the current value of counter ``name`` and increment it.

        A counter that does not exist yet is created and yields 1. Store
        errors and ``asyncio.TimeoutError`` propagate unchanged; a stored
        value that is not an integer raises ``NotIntegerValueError``.
        """
        logger.debug(f"Attempting to get next sequence value for: {name}")
        try:
            doc = await self.retry_policy.run(lambda: self._increment(name), label=f"sequence '{name}'")
        except OperationFailure as e:
            if e.code == TYPE_MISMATCH_CODE:
                logger.error(f"Sequence '{name}' holds a non-numeric value: {e}", exc_info=True)
                raise NotIntegerValueError(name, details=e.details) from e
            raise

        try:
            value = decode_value(name, doc)
        except NotIntegerValueError as e:
            logger.error(f"Error decoding sequence '{name}': {e}", exc_info=True)
            raise
        logger.debug(f"Next sequence value for '{name}': {value}")
        return value

    async def peek(self, name: str) -> Optional[CounterRecord]:
        """Read counter ``name`` without incrementing it; None if it does not exist."""
        doc = await asyncio.wait_for(
            self.store.collection().find_one({"_id": name}),
            timeout=self.timeout,
        )
        if doc is None:
            return None
        return CounterRecord.from_document(doc)

    async def _increment(self, name: str) -> dict:
        # Each attempt gets the full timeout; a cancelled attempt may still commit
        doc = await asyncio.wait_for(
            self.store.collection().find_one_and_update(
                {"_id": name},
                {"$inc": {"value": 1}},
                upsert=True,
                return_document=ReturnDocument.BEFORE,
            ),
            timeout=self.timeout,
        )
        if doc is None:
            # The upsert inserted the counter, so there is no prior state to return
            raise CounterNotFoundError(name)
        return doc

    def __repr__(self) -> str:
        return f"Sequence({self.store!r}, timeout={self.timeout})"
