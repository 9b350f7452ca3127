"""
Admin account maintenance
Creates, resets and verifies the single administrator of the gallery
"""

import bcrypt
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from config import settings
from database import get_collection
from errors import AdminConflictError, AdminNotFoundError, MaintenanceError
from models.user import User, UserRole

logger = logging.getLogger(__name__)

# Matches the cost factor the web application hashes with
DEFAULT_BCRYPT_ROUNDS = 10

class AdminService:
    def __init__(self, db, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.users = get_collection(db, "users")
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        """Hash password using bcrypt"""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify password against hash"""
        return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))

    async def find_admin(self) -> Optional[User]:
        document = await self.users.find_one({"role": UserRole.ADMIN.value})
        return User.from_document(document) if document else None

    async def _check_single_admin(self, email: str):
        existing = await self.find_admin()
        if existing and existing.email != email:
            raise AdminConflictError(existing.email)

    async def create_admin(
        self,
        email: str = None,
        password: str = None,
        name: str = None
    ) -> User:
        """Replace any account using the admin email with a fresh verified admin"""
        email = email or settings.admin_email
        password = password or settings.admin_password
        name = name or settings.admin_name

        await self._check_single_admin(email)
        await self.users.delete_one({"email": email})

        admin = User(
            name=name,
            email=email,
            password=self.hash_password(password),
            role=UserRole.ADMIN,
            is_verified=True
        )
        result = await self.users.insert_one(admin.to_document())
        admin.id = result.inserted_id
        logger.info(f"Created admin user {email}")
        return admin

    async def reset_password(self, email: str = None, password: str = None) -> User:
        """Set a new password on the existing admin account"""
        email = email or settings.admin_email
        password = password or settings.admin_password

        document = await self.users.find_one({"email": email, "role": UserRole.ADMIN.value})
        if not document:
            raise AdminNotFoundError(email)

        hashed = self.hash_password(password)
        await self.users.update_one(
            {"_id": document["_id"]},
            {"$set": {"password": hashed}}
        )
        document["password"] = hashed
        logger.info(f"Reset password for admin {email}")
        return User.from_document(document)

    async def ensure_admin(
        self,
        email: str = None,
        password: str = None,
        name: str = None
    ) -> Tuple[User, bool]:
        """
        Make sure exactly one verified admin with the given credentials exists.

        The existing admin (if any) is updated in place, otherwise a new one is
        created. Returns the stored admin and whether it was created.
        """
        email = email or settings.admin_email
        password = password or settings.admin_password
        name = name or settings.admin_name

        existing = await self.find_admin()
        if existing is None:
            return await self.create_admin(email, password, name), True

        updates = {
            "email": email,
            "name": name,
            "password": self.hash_password(password),
            "isVerified": True,
            "updatedAt": datetime.now(timezone.utc),
        }
        await self.users.update_one({"_id": existing.id}, {"$set": updates})
        logger.info(f"Updated existing admin user {existing.email} -> {email}")

        document = await self.users.find_one({"_id": existing.id})
        admin = User.from_document(document)
        if not self.verify_password(password, admin.password):
            raise MaintenanceError(f"Stored password for admin {email} does not verify")
        return admin, False

    async def verify_credentials(self, email: str, password: str) -> bool:
        document = await self.users.find_one({"email": email})
        if not document:
            return False
        return self.verify_password(password, document["password"])
