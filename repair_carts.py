"""
Migrate cart items from the legacy galleryItem field to product
Carts left with an item that has no product reference are deleted
"""
import asyncio
import logging
import sys
from pymongo.errors import PyMongoError

from config import settings
from database import open_database
from services.cart_repair import repair_all_carts

logger = logging.getLogger(__name__)

async def main() -> bool:
    print("🛠️  Repairing carts...")
    print(f"📊 Database: {settings.db_name}")

    try:
        async with open_database() as db:
            report = await repair_all_carts(db)
    except PyMongoError as e:
        logger.error(f"Cart repair failed: {e}")
        print(f"❌ Cart repair failed: {e}")
        return False

    print(f"   Carts scanned:   {report.scanned}")
    print(f"   Carts rewritten: {report.rewritten}")
    if report.skipped:
        print(f"   Carts skipped:   {report.skipped} (changed during the run, run again to fix them)")
    print(f"   Carts deleted:   {report.deleted}")

    if not report.succeeded:
        for error in report.errors:
            print(f"❌ {error}")
        print("⚠️  Repair incomplete, it is safe to run this script again")
        return False

    print("🎉 Cart repair complete!")
    return True

if __name__ == "__main__":
    success = asyncio.run(main())
    sys.exit(0 if success else 1)
