"""
Make sure the single admin account exists with the configured credentials
Updates the current admin in place, or creates one when there is none
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
    print("🔍 Verifying admin user...")

    try:
        async with open_database() as db:
            service = AdminService(db)
            admin, created = await service.ensure_admin()
            password_ok = await service.verify_credentials(admin.email, settings.admin_password)
    except (MaintenanceError, PyMongoError) as e:
        logger.error(f"Verifying admin failed: {e}")
        print(f"❌ {e}")
        return False

    print("✅ Created new admin user" if created else "✅ Updated existing admin user")
    print(f"   Name: {admin.name}")
    print(f"   Email: {admin.email}")
    print(f"   Role: {admin.role}")
    print(f"   Is Verified: {admin.is_verified}")
    print(f"   Created At: {admin.created_at}")
    print(f"   Password check: {'passed' if password_ok else 'FAILED'}")
    return password_ok

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
