# mongo_sequence/models/counter.py
from typing import Any, Mapping, Optional

from beanie import Document
from bson.int64 import Int64
from pydantic import BaseModel, Field

from mongo_sequence.core.config import DEFAULT_COLLECTION_NAME
from mongo_sequence.core.exceptions import NotIntegerValueError

# BSON int32 decodes to int, int64 to int (or Int64 with some codec options)
INTEGER_TYPES = (int, Int64)


class SequenceCounter(Document):
    """Holds the next value for a named sequence."""
    # _id is the sequence name, so MongoDB keeps one record per name
    id: str
    value: int = 0 # Next value to hand out

    class Settings:
        name = DEFAULT_COLLECTION_NAME


class CounterRecord(BaseModel):
    """Read-only snapshot of a counter document."""
    name: str = Field(..., alias="_id")
    value: int

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "CounterRecord":
        name = doc.get("_id")
        return cls(name=name, value=decode_value(name, doc))


def decode_value(name: Optional[str], doc: Mapping[str, Any]) -> int:
    """Return the document's ``value`` as a plain int.

    Only integer BSON types are accepted; bool is rejected even though it
    subclasses int, and nothing is coerced.
    """
    value = doc.get("value")
    if isinstance(value, bool) or not isinstance(value, INTEGER_TYPES):
        raise NotIntegerValueError(name, value)
    return int(value)
