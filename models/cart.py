"""
Cart models for the art gallery shop

Cart items were originally stored with their product reference under
``galleryItem``; the shop now reads ``product``. Every stored item is
classified by where (if anywhere) its reference lives, so the repair code
never has to reason about "present but null" versus "absent".
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

LEGACY_FIELD = "galleryItem"
CURRENT_FIELD = "product"

class RefKind(str, Enum):
    LEGACY = "legacy"     # reference stored under galleryItem only
    CURRENT = "current"   # reference stored under product
    MISSING = "missing"   # no usable reference at all

class ItemRef(BaseModel):
    """Tagged product reference of a cart item"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: RefKind
    value: Optional[Any] = None

    @classmethod
    def legacy(cls, value: Any) -> "ItemRef":
        return cls(kind=RefKind.LEGACY, value=value)

    @classmethod
    def current(cls, value: Any) -> "ItemRef":
        return cls(kind=RefKind.CURRENT, value=value)

    @classmethod
    def missing(cls) -> "ItemRef":
        return cls(kind=RefKind.MISSING)

    @classmethod
    def classify(cls, document: Dict[str, Any]) -> "ItemRef":
        """Classify a stored item document by its reference fields"""
        product = document.get(CURRENT_FIELD)
        if product is not None:
            return cls.current(product)
        gallery_item = document.get(LEGACY_FIELD)
        if gallery_item is not None:
            return cls.legacy(gallery_item)
        return cls.missing()

class CartItem(BaseModel):
    """A cart line entry: its reference tag plus every other stored field"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ref: ItemRef
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "CartItem":
        ref = ItemRef.classify(document)
        if ref.kind == RefKind.CURRENT:
            consumed = {CURRENT_FIELD}
        else:
            consumed = {CURRENT_FIELD, LEGACY_FIELD}
        attributes = {key: value for key, value in document.items() if key not in consumed}
        return cls(ref=ref, attributes=attributes)

    def to_document(self) -> Dict[str, Any]:
        document = dict(self.attributes)
        if self.ref.kind == RefKind.CURRENT:
            document[CURRENT_FIELD] = self.ref.value
        elif self.ref.kind == RefKind.LEGACY:
            document[LEGACY_FIELD] = self.ref.value
        return document

    @property
    def id(self) -> Any:
        return self.attributes.get("_id")

    @property
    def quantity(self) -> Any:
        return self.attributes.get("quantity")

    @property
    def price(self) -> Any:
        return self.attributes.get("price")

    @property
    def is_legacy(self) -> bool:
        return self.ref.kind == RefKind.LEGACY

    @property
    def is_missing(self) -> bool:
        return self.ref.kind == RefKind.MISSING

class Cart(BaseModel):
    """One user's cart as stored in the carts collection"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: Any
    user: Optional[Any] = None
    items: List[CartItem] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Cart":
        return cls(
            id=document.get("_id"),
            user=document.get("user"),
            items=[CartItem.from_document(item) for item in document.get("items") or []],
        )

    def item_documents(self) -> List[Dict[str, Any]]:
        return [item.to_document() for item in self.items]

    @property
    def has_legacy_items(self) -> bool:
        return any(item.is_legacy for item in self.items)

    @property
    def is_broken(self) -> bool:
        """True when some item has no product reference to fall back on"""
        return any(item.is_missing for item in self.items)

# Query fragments matching the classification above; {"field": None}
# matches both a null and an absent field.
LEGACY_ITEMS_QUERY = {
    "items": {"$elemMatch": {LEGACY_FIELD: {"$ne": None}, CURRENT_FIELD: None}}
}
ITEMS_WITHOUT_PRODUCT_QUERY = {
    "items": {"$elemMatch": {CURRENT_FIELD: None}}
}
