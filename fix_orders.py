"""
Attach the product's seller to order items that are missing one
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from database import open_database
from services.order_repair import backfill_order_sellers

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("🛠️  Fixing order sellers...")

    try:
        async with open_database() as db:
            report = await backfill_order_sellers(db)
    except PyMongoError as e:
        logger.error(f"Fixing orders failed: {e}")
        print(f"❌ Error fixing orders: {e}")
        return False

    print("\n---------- SUMMARY ----------")
    print(f"Total orders processed: {report.processed}")
    print(f"Orders fixed: {report.fixed_orders}")
    print(f"Total items fixed: {report.fixed_items}")
    if report.unresolved_items:
        print(f"⚠️  Items without a resolvable seller: {report.unresolved_items}")
    return True

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
