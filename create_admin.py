"""
Create the admin account from ADMIN_EMAIL / ADMIN_NAME / ADMIN_PASSWORD
Any account already using that email is replaced
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from config import settings
from database import open_database
from errors import MaintenanceError
from services.admin_service import AdminService

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("👤 Creating admin user...")

    try:
        async with open_database() as db:
            admin = await AdminService(db).create_admin()
    except (MaintenanceError, PyMongoError) as e:
        logger.error(f"Creating admin failed: {e}")
        print(f"❌ {e}")
        return False

    print("✅ Admin user created successfully!")
    print(f"   Email: {admin.email}")
    print(f"   Role: {admin.role}")
    print(f"   Is Verified: {admin.is_verified}")
    if settings.is_development:
        print(f"   Password: {settings.admin_password}")
    return True

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
