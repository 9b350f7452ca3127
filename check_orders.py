"""
Report order items that are missing their seller
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from database import open_database
from services.order_repair import diagnose_orders

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("🔍 Checking orders...")

    try:
        async with open_database() as db:
            diagnoses = await diagnose_orders(db)
    except PyMongoError as e:
        logger.error(f"Checking orders failed: {e}")
        print(f"❌ Error checking orders: {e}")
        return False

    print(f"📊 Found {len(diagnoses)} orders in the database")

    affected = 0
    for diagnosis in diagnoses:
        if not diagnosis.items_missing_seller:
            continue
        affected += 1
        print(f"\nOrder {diagnosis.order_id} (user {diagnosis.user}, status {diagnosis.status}, total {diagnosis.total_amount})")
        for item in diagnosis.items_missing_seller:
            print(f"  ⚠️  Item {item.index + 1}: {item.title or 'Untitled'} ({item.product}) has no seller")
            if item.product_seller:
                print(f"     Product's seller: {item.product_seller}")
            else:
                print("     Product not found or has no seller")

    if affected:
        print(f"\n⚠️  {affected} orders have items without a seller, run fix_orders.py to attach them")
    else:
        print("✅ Every order item has a seller")
    return True

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
