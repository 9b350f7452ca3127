"""
Delete every order
Pass --yes to skip the confirmation prompt
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from config import settings
from database import open_database
from services.order_repair import delete_all_orders

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("🧹 Deleting all orders...")

    try:
        async with open_database() as db:
            deleted = await delete_all_orders(db)
    except PyMongoError as e:
        logger.error(f"Deleting orders failed: {e}")
        print(f"❌ Error deleting orders: {e}")
        return False

    if deleted:
        print(f"✅ Successfully deleted {deleted} orders from the database")
    else:
        print("ℹ️  No orders found to delete.")
    return True

if __name__ == "__main__":
    if "--yes" not in sys.argv:
        confirm = input(f"Delete ALL orders in '{settings.db_name}'? (yes/no): ")
        if confirm.lower() != "yes":
            print("Cleanup cancelled.")
            sys.exit(0)
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
