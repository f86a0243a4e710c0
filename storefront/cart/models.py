"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple, Union

from storefront.services.money import multiply, to_decimal

ItemId = Union[str, int]


@dataclass
class CartLineItem:
    """A product sitting in the cart.

    ``id`` is an opaque key: the cart never interprets it, it only
    compares it for equality.
    """
    id: ItemId
    slug: str
    name: str
    price: Decimal
    quantity: int
    sku: Optional[str] = None
    vendor_id: Optional[ItemId] = None
    category_id: Optional[ItemId] = None

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Line item shape shared with templates and JSON callers."""
        data = {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }
        for key in ("sku", "vendor_id", "category_id"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        """Create from the line item shape."""
        return cls(
            id=data["id"],
            slug=data["slug"],
            name=data["name"],
            price=to_decimal(data["price"]),
            quantity=int(data["quantity"]),
            sku=data.get("sku"),
            vendor_id=data.get("vendor_id"),
            category_id=data.get("category_id"),
        )


@dataclass(frozen=True)
class CartState:
    """Snapshot of the cart. Never mutated; every action yields a new one."""
    items: Tuple[CartLineItem, ...] = field(default_factory=tuple)

    @property
    def total(self) -> Decimal:
        """Sum of price x quantity, recomputed on every read."""
        return sum((item.line_total for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, item_id: ItemId) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.id == item_id), None)
