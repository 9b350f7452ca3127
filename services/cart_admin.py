"""
Bulk cart removal
"""

import logging

from database import get_collection
from models.base import to_object_id

logger = logging.getLogger(__name__)

async def delete_all_carts(db) -> int:
    """Remove every cart, returning how many were deleted"""
    result = await get_collection(db, "carts").delete_many({})
    logger.info(f"Deleted {result.deleted_count} carts")
    return result.deleted_count

async def delete_user_cart(db, user_id) -> bool:
    """Remove the cart owned by one user; False when that user has no cart"""
    result = await get_collection(db, "carts").delete_one({"user": to_object_id(user_id)})
    deleted = result.deleted_count == 1
    if deleted:
        logger.info(f"Deleted cart for user {user_id}")
    else:
        logger.info(f"No cart found for user {user_id}")
    return deleted
