"""
Delete the cart of a single user
Usage: python delete_user_cart.py <user_id>
"""
import asyncio
import logging
import sys
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from database import open_database
from services.cart_admin import delete_user_cart

logger = logging.getLogger(__name__)

async def main(user_id: str) -> bool:
    print(f"🧹 Deleting cart for user {user_id}...")

    try:
        async with open_database() as db:
            deleted = await delete_user_cart(db, user_id)
    except InvalidId:
        print(f"❌ Not a valid user id: {user_id}")
        return False
    except PyMongoError as e:
        logger.error(f"Deleting cart for user {user_id} failed: {e}")
        print(f"❌ Error deleting cart: {e}")
        return False

    if deleted:
        print(f"✅ Successfully deleted cart for user {user_id}")
    else:
        print(f"ℹ️  No cart found for user {user_id}")
    return True

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python delete_user_cart.py <user_id>")
        sys.exit(2)
    success = asyncio.run(main(sys.argv[1]))
    sys.exit(0 if success else 1)
