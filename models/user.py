"""
User account model as stored by the art gallery application
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import EmailStr, Field
from enum import Enum

from .base import MongoBaseModel

# User roles enum
class UserRole(str, Enum):
    ADMIN = "admin"                # Single site administrator
    USER = "user"                  # Regular customer account
    SELLER = "seller"              # Artist selling through the gallery
    PSYCHOLOGIST = "psychologist"  # Reviews psychometric tests

class User(MongoBaseModel):
    id: Optional[Any] = Field(None, alias="_id")  # ObjectId once stored
    name: str
    email: EmailStr
    password: str  # bcrypt hash
    role: UserRole = UserRole.USER
    is_verified: bool = Field(False, alias="isVerified")
    is_active: bool = Field(True, alias="isActive")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        """Document in the application's field naming, without _id when unset"""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
