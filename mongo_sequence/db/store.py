# mongo_sequence/db/store.py
"""Bindings between a Sequence and the collection holding its counters.

A store only knows how to hand out the collection for the next command.
Stores bound by name resolve the collection on every call: resolving is a
cheap, local operation in motor/pymongo, and re-resolving means a re-pointed
database or beanie model takes effect immediately.
"""
from abc import ABC, abstractmethod
from typing import Any, Type

from beanie import Document

from mongo_sequence.core.config import DEFAULT_COLLECTION_NAME


class SequenceStore(ABC):
    @abstractmethod
    def collection(self) -> Any:
        """Return the collection the next command should run against."""


class CollectionStore(SequenceStore):
    """Bound to an already-resolved collection."""

    def __init__(self, collection: Any):
        self._collection = collection

    def collection(self) -> Any:
        return self._collection

    def __repr__(self) -> str:
        return f"CollectionStore({getattr(self._collection, 'full_name', self._collection)!r})"


class DatabaseStore(SequenceStore):
    """Bound to a (database, collection name) pair."""

    def __init__(self, database: Any, collection_name: str = DEFAULT_COLLECTION_NAME):
        self.database = database
        self.collection_name = collection_name

    def collection(self) -> Any:
        return self.database[self.collection_name]

    def __repr__(self) -> str:
        return f"DatabaseStore({getattr(self.database, 'name', self.database)!r}, {self.collection_name!r})"


class DocumentModelStore(SequenceStore):
    """Bound to a beanie Document class registered through init_beanie()."""

    def __init__(self, model: Type[Document]):
        self.model = model

    def collection(self) -> Any:
        return self.model.get_motor_collection()

    def __repr__(self) -> str:
        return f"DocumentModelStore({self.model.__name__})"


def as_store(handle: Any) -> SequenceStore:
    """Wrap a raw collection in a CollectionStore; stores pass through."""
    if isinstance(handle, SequenceStore):
        return handle
    return CollectionStore(handle)
