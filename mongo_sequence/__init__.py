"""mongo_sequence - auto-increment style counters on MongoDB."""
import logging

from loguru import logger

# Silent unless the application opts in (setup_logging() or logger.enable)
logger.disable("mongo_sequence")
logging.getLogger("mongo_sequence").addHandler(logging.NullHandler())

from .core.config import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_SEQUENCE_NAME,
    DEFAULT_TIMEOUT,
    setup_logging,
)
from .core.default import (
    get_default_sequence,
    next_val,
    reset_default_sequence,
    setup_default_sequence,
)
from .core.exceptions import (
    CounterNotFoundError,
    NotIntegerValueError,
    SequenceError,
    SequenceNotConfiguredError,
)
from .core.retry import RetryPolicy, is_creation_race
from .core.sequence import Sequence
from .db.store import CollectionStore, DatabaseStore, DocumentModelStore, SequenceStore
from .models.counter import CounterRecord, SequenceCounter

__version__ = "0.1.0"
__all__ = [
    "Sequence",
    "setup_default_sequence",
    "get_default_sequence",
    "reset_default_sequence",
    "next_val",
    "RetryPolicy",
    "is_creation_race",
    "SequenceStore",
    "CollectionStore",
    "DatabaseStore",
    "DocumentModelStore",
    "CounterRecord",
    "SequenceCounter",
    "SequenceError",
    "CounterNotFoundError",
    "NotIntegerValueError",
    "SequenceNotConfiguredError",
    "DEFAULT_COLLECTION_NAME",
    "DEFAULT_SEQUENCE_NAME",
    "DEFAULT_TIMEOUT",
    "setup_logging",
]
