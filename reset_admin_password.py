"""
Reset the admin password to ADMIN_PASSWORD
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
    print(f"🔑 Resetting password for {settings.admin_email}...")

    try:
        async with open_database() as db:
            await AdminService(db).reset_password()
    except (MaintenanceError, PyMongoError) as e:
        logger.error(f"Resetting admin password failed: {e}")
        print(f"❌ {e}")
        return False

    print("✅ Admin password reset successfully!")
    print("   Please try logging in with the configured credentials.")
    return True

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
