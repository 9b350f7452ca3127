"""
Order maintenance
Diagnoses and backfills the seller of order items, and bulk-removes orders
"""

import logging
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from bson import ObjectId
from bson.errors import InvalidId

from database import get_collection

logger = logging.getLogger(__name__)

class ItemDiagnosis(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: int
    product: Optional[Any] = None
    title: Optional[str] = None
    seller: Optional[Any] = None
    product_seller: Optional[Any] = None  # seller the referenced product would supply

class OrderDiagnosis(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    order_id: Any
    user: Optional[Any] = None
    status: Optional[str] = None
    total_amount: Optional[float] = None
    item_count: int = 0
    items_missing_seller: List[ItemDiagnosis] = Field(default_factory=list)

class OrderRepairReport(BaseModel):
    processed: int = 0
    fixed_orders: int = 0
    fixed_items: int = 0
    unresolved_items: int = 0

def items_missing_seller(order: Dict[str, Any]) -> List[int]:
    """Indexes of items that reference a product but carry no seller"""
    return [
        index for index, item in enumerate(order.get("items") or [])
        if item.get("product") and not item.get("seller")
    ]

def _as_object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except InvalidId:
        return None

class _ProductSellers:
    """Caches product -> seller lookups for one run"""

    def __init__(self, products_collection):
        self.products = products_collection
        self.cache: Dict[Any, Optional[Any]] = {}

    async def get(self, product_ref: Any) -> Optional[Any]:
        product_id = _as_object_id(product_ref)
        if product_id is None:
            logger.warning(f"Order item references invalid product id {product_ref!r}")
            return None
        if product_id not in self.cache:
            product = await self.products.find_one({"_id": product_id}, {"seller": 1})
            self.cache[product_id] = product.get("seller") if product else None
        return self.cache[product_id]

async def diagnose_orders(db) -> List[OrderDiagnosis]:
    orders = await get_collection(db, "orders").find({}).to_list(None)
    sellers = _ProductSellers(get_collection(db, "products"))
    diagnoses = []

    for order in orders:
        items = order.get("items") or []
        diagnosis = OrderDiagnosis(
            order_id=order.get("_id"),
            user=order.get("user"),
            status=order.get("status"),
            total_amount=order.get("totalAmount"),
            item_count=len(items),
        )
        for index in items_missing_seller(order):
            item = items[index]
            diagnosis.items_missing_seller.append(ItemDiagnosis(
                index=index,
                product=item.get("product"),
                title=item.get("title"),
                product_seller=await sellers.get(item["product"]),
            ))
        diagnoses.append(diagnosis)

    return diagnoses

async def backfill_order_sellers(db) -> OrderRepairReport:
    """Copy each referenced product's seller onto order items that lack one"""
    orders_collection = get_collection(db, "orders")
    sellers = _ProductSellers(get_collection(db, "products"))
    orders = await orders_collection.find({}).to_list(None)
    report = OrderRepairReport()

    for order in orders:
        report.processed += 1
        missing = items_missing_seller(order)
        if not missing:
            continue

        items = [dict(item) for item in order["items"]]
        fixed = 0
        for index in missing:
            seller = await sellers.get(items[index]["product"])
            if seller is None:
                report.unresolved_items += 1
                logger.warning(f"Order {order['_id']}: no seller found for product {items[index]['product']}")
                continue
            items[index]["seller"] = seller
            fixed += 1

        if fixed:
            await orders_collection.update_one(
                {"_id": order["_id"]},
                {"$set": {"items": items}}
            )
            report.fixed_orders += 1
            report.fixed_items += fixed
            logger.info(f"Order {order['_id']}: attached seller to {fixed} item(s)")

    return report

async def delete_all_orders(db) -> int:
    result = await get_collection(db, "orders").delete_many({})
    logger.info(f"Deleted {result.deleted_count} orders")
    return result.deleted_count
