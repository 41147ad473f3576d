# mongo_sequence/core/default.py
"""Process-wide default Sequence for call sites that do not hold one."""
import logging
import threading
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.collection import Collection
from pymongo.database import Database

from mongo_sequence.core.config import DEFAULT_COLLECTION_NAME, DEFAULT_SEQUENCE_NAME
from mongo_sequence.core.exceptions import SequenceNotConfiguredError
from mongo_sequence.core.sequence import Sequence
from mongo_sequence.db.store import DatabaseStore

# Handles bound by name rather than used as the collection
DATABASE_TYPES = (AsyncIOMotorDatabase, AsyncDatabase)
# Blocking pymongo handles cannot serve the coroutine API
SYNC_TYPES = (Database, Collection)

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default_sequence: Optional[Sequence] = None


def setup_default_sequence(handle: Any, timeout: Optional[float] = None) -> Sequence:
    """Install the default Sequence.

    A database handle is bound to the default collection; anything else is
    used as the collection (or store) itself.
    """
    global _default_sequence
    if isinstance(handle, DATABASE_TYPES):
        handle = DatabaseStore(handle, DEFAULT_COLLECTION_NAME)
    elif handle is None:
        raise ValueError("setup_default_sequence() needs a database, collection or store")
    elif isinstance(handle, SYNC_TYPES):
        raise ValueError(
            f"setup_default_sequence() needs an async handle (motor or pymongo async), got {type(handle).__name__}"
        )

    sequence = Sequence(handle, timeout)
    with _lock:
        _default_sequence = sequence
    logger.info(f"Default sequence configured: {sequence!r}")
    return sequence


def get_default_sequence() -> Sequence:
    with _lock:
        sequence = _default_sequence
    if sequence is None:
        raise SequenceNotConfiguredError()
    return sequence


def reset_default_sequence() -> None:
    global _default_sequence
    with _lock:
        _default_sequence = None


async def next_val(name: str = DEFAULT_SEQUENCE_NAME) -> int:
    """Shortcut for ``get_default_sequence().next_val(name)``."""
    return await get_default_sequence().next_val(name)
