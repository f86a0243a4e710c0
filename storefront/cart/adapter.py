"""Turn a product record into a cart line and add it."""
from typing import Optional

from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.models import ProductRecord
from storefront.services.money import to_decimal

from .context import use_cart
from .models import CartLineItem
from .service import CartStore

logger = get_logger(__name__)


def to_line_item(product: ProductRecord) -> Optional[CartLineItem]:
    """Single-unit cart line for ``product``, or None when it has no price."""
    if product.price is None:
        return None
    return CartLineItem(
        id=product.id,
        slug=product.slug,
        name=product.name,
        price=to_decimal(product.price),
        quantity=1,
        sku=product.sku,
        vendor_id=product.vendor_id,
        category_id=product.category_id,
    )


def add_to_cart(product: ProductRecord, cart: Optional[CartStore] = None) -> Optional[CartLineItem]:
    """
    "Add to cart" action of the product page.

    Products without a price are silently skipped.

    Args:
        product: Product shown on the page
        cart: Target store; defaults to ``use_cart()``

    Returns:
        The line that was added, or None if nothing was added
    """
    item = to_line_item(product)
    if item is None:
        logger.info(f"Skipping add to cart for unpriced product {sanitize_string_for_logging(product.slug)}")
        return None

    (cart or use_cart()).add_item(item)
    return item
