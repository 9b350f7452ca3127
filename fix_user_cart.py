"""
Repair the cart of a single user
Usage: python fix_user_cart.py <user_id>
"""
import asyncio
import logging
import sys
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from database import open_database
from services.cart_repair import repair_user_cart

logger = logging.getLogger(__name__)

async def main(user_id: str) -> bool:
    print(f"🛠️  Checking cart for user {user_id}...")

    try:
        async with open_database() as db:
            fixed = await repair_user_cart(db, user_id)
    except InvalidId:
        print(f"❌ Not a valid user id: {user_id}")
        return False
    except PyMongoError as e:
        logger.error(f"Fixing cart for user {user_id} failed: {e}")
        print(f"❌ Error fixing cart: {e}")
        return False

    if fixed:
        print("✅ Cart fixed successfully!")
    else:
        print("✅ Cart does not need fixing")
    return True

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python fix_user_cart.py <user_id>")
        sys.exit(2)
    success = asyncio.run(main(sys.argv[1]))
    sys.exit(0 if success else 1)
