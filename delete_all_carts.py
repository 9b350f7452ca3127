"""
Delete every shopping cart
Pass --yes to skip the confirmation prompt
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from config import settings
from database import open_database
from services.cart_admin import delete_all_carts

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("🧹 Deleting all carts...")

    try:
        async with open_database() as db:
            deleted = await delete_all_carts(db)
    except PyMongoError as e:
        logger.error(f"Deleting carts failed: {e}")
        print(f"❌ Error deleting carts: {e}")
        return False

    print(f"✅ Deleted {deleted} carts from the database")
    return True

if __name__ == "__main__":
    if "--yes" not in sys.argv:
        confirm = input(f"Delete ALL carts in '{settings.db_name}'? (yes/no): ")
        if confirm.lower() != "yes":
            print("Cleanup cancelled.")
            sys.exit(0)
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
