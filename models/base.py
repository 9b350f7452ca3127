"""
Base models and utilities for MongoDB ObjectId handling
"""

from typing import Any
from pydantic import BaseModel, ConfigDict
from bson import ObjectId


def to_object_id(value: Any) -> ObjectId:
    """Coerce a hex string (or ObjectId) to ObjectId, raising bson's InvalidId otherwise"""
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


class MongoBaseModel(BaseModel):
    """Base model for MongoDB documents with ObjectId handling"""

    model_config = ConfigDict(
        # Allow population by field name (for MongoDB's _id field)
        populate_by_name=True,
        # Use enum values instead of names
        use_enum_values=True,
        # ObjectId values pass through untouched
        arbitrary_types_allowed=True
    )
