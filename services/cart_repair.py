"""
Cart item repair engine
Migrates cart items stored under the legacy galleryItem field to product and
removes carts that still hold an item without any product reference
"""

import logging
from typing import Any, Dict, Iterable, List
from pydantic import BaseModel, ConfigDict, Field
from pymongo.errors import PyMongoError

from database import get_collection
from models.base import to_object_id
from models.cart import (
    Cart,
    CartItem,
    ItemRef,
    RefKind,
    LEGACY_ITEMS_QUERY,
    ITEMS_WITHOUT_PRODUCT_QUERY,
)

logger = logging.getLogger(__name__)

class CartRewrite(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    cart_id: Any
    items: List[Dict[str, Any]]
    # items exactly as read; the write only applies while they are unchanged
    original_items: List[Dict[str, Any]] = Field(default_factory=list)

class RepairPlan(BaseModel):
    """Writes and deletions decided for a batch of carts"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    scanned: int = 0
    rewrites: List[CartRewrite] = Field(default_factory=list)
    deletions: List[Any] = Field(default_factory=list)

class RepairReport(BaseModel):
    scanned: int = 0
    rewritten: int = 0
    skipped: int = 0  # changed by someone else between read and write
    deleted: int = 0
    errors: List[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors

def repair_item(item: CartItem) -> CartItem:
    """Move a legacy galleryItem reference to product; anything else is returned as is"""
    if item.ref.kind != RefKind.LEGACY:
        return item
    return item.model_copy(update={"ref": ItemRef.current(item.ref.value)})

def repair_cart(cart: Cart) -> Cart:
    return cart.model_copy(update={"items": [repair_item(item) for item in cart.items]})

def plan_repair(carts: Iterable[Dict[str, Any]]) -> RepairPlan:
    """
    Decide, without touching the database, which carts get their items
    rewritten and which carts are deleted.

    A cart is rewritten when any of its items is legacy. It is deleted when,
    after the rewrite, any item still has no product reference; the whole
    cart goes, not just the offending item.
    """
    plan = RepairPlan()
    for document in carts:
        plan.scanned += 1
        cart = Cart.from_document(document)

        if cart.has_legacy_items:
            cart = repair_cart(cart)
            plan.rewrites.append(CartRewrite(
                cart_id=cart.id,
                items=cart.item_documents(),
                original_items=document.get("items") or [],
            ))

        if cart.is_broken:
            plan.deletions.append(cart.id)

    return plan

async def _rewrite_legacy_carts(carts_collection, report: RepairReport):
    documents = await carts_collection.find(LEGACY_ITEMS_QUERY).to_list(None)
    plan = plan_repair(documents)
    report.scanned = plan.scanned
    logger.info(f"Found {plan.scanned} carts with legacy galleryItem entries")

    for rewrite in plan.rewrites:
        if await _apply_rewrite(carts_collection, rewrite):
            report.rewritten += 1
            logger.debug(f"Rewrote items of cart {rewrite.cart_id}")
        else:
            report.skipped += 1
            logger.warning(f"Cart {rewrite.cart_id} changed since it was read, left for the next run")

async def _apply_rewrite(carts_collection, rewrite: CartRewrite) -> bool:
    """Replace the whole items array in one write, only if it still holds what was read"""
    result = await carts_collection.update_one(
        {"_id": rewrite.cart_id, "items": rewrite.original_items},
        {"$set": {"items": rewrite.items}}
    )
    return result.matched_count == 1

async def _delete_broken_carts(carts_collection, report: RepairReport):
    documents = await carts_collection.find(ITEMS_WITHOUT_PRODUCT_QUERY).to_list(None)
    # Re-check through the planner so that carts still holding recoverable
    # legacy items (e.g. after a failed rewrite) are never deleted.
    deletions = plan_repair(documents).deletions
    if not deletions:
        return

    result = await carts_collection.delete_many({"_id": {"$in": deletions}})
    report.deleted = result.deleted_count
    logger.info(f"Deleted {result.deleted_count} carts with items lacking a product")

async def repair_all_carts(db) -> RepairReport:
    """
    Run the repair pass followed by the cleanup sweep.

    A persistence error aborts the phase it happened in; it is logged and
    recorded on the report, and the next phase still runs. Running this
    again is always safe.
    """
    carts_collection = get_collection(db, "carts")
    report = RepairReport()

    try:
        await _rewrite_legacy_carts(carts_collection, report)
    except PyMongoError as e:
        logger.error(f"Cart rewrite phase aborted: {e}")
        report.errors.append(f"rewrite: {e}")

    try:
        await _delete_broken_carts(carts_collection, report)
    except PyMongoError as e:
        logger.error(f"Cart cleanup sweep aborted: {e}")
        report.errors.append(f"cleanup: {e}")

    logger.info(
        f"Cart repair finished: scanned={report.scanned} "
        f"rewritten={report.rewritten} skipped={report.skipped} deleted={report.deleted}"
    )
    return report

async def repair_user_cart(db, user_id) -> bool:
    """Repair the cart of a single user. Returns True when the cart was rewritten."""
    carts_collection = get_collection(db, "carts")
    document = await carts_collection.find_one({"user": to_object_id(user_id)})

    if not document:
        logger.info(f"No cart found for user {user_id}")
        return False

    cart = Cart.from_document(document)
    if not cart.has_legacy_items:
        logger.info(f"Cart {cart.id} does not need fixing")
        return False

    for item in cart.items:
        if item.is_legacy:
            logger.info(f"Fixing item {item.id}: moving galleryItem to product")

    rewrite = CartRewrite(
        cart_id=cart.id,
        items=repair_cart(cart).item_documents(),
        original_items=document["items"],
    )
    if not await _apply_rewrite(carts_collection, rewrite):
        logger.warning(f"Cart {cart.id} changed while it was being fixed, run again")
        return False
    return True
