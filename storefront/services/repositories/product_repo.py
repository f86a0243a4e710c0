"""Product Repository - catalog reads from the products table."""
from typing import List, Optional, Tuple

from storefront.services.catalog_query import ORDER_COLUMN, CatalogQuery
from storefront.services.models import ProductRecord

from .base import BaseRepository

PRODUCT_LIST_COLUMNS = "id, slug, name, sku, price, vendor_id, category_id"
PRODUCT_DETAIL_COLUMNS = "id, slug, name, sku, price, description, vendor_id, category_id"
PRODUCT_FEATURED_COLUMNS = "id, slug, name, sku, price, image_url, vendor_id, category_id"


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def list_page(self, query: CatalogQuery) -> Tuple[List[ProductRecord], int]:
        """Fetch one catalog page plus the exact number of matching rows."""
        request = self.client.table("products").select(PRODUCT_LIST_COLUMNS, count="exact")
        result = await query.apply(request).execute()
        products = [ProductRecord(**row) for row in result.data or []]
        return products, result.count or 0

    async def get_by_slug(self, slug: str) -> Optional[ProductRecord]:
        """Get a single product by its slug."""
        result = await (
            self.client.table("products")
            .select(PRODUCT_DETAIL_COLUMNS)
            .eq("slug", slug)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return ProductRecord(**result.data[0])

    async def get_featured(self, limit: int = 8) -> List[ProductRecord]:
        """First ``limit`` products by name for the landing page."""
        result = await (
            self.client.table("products")
            .select(PRODUCT_FEATURED_COLUMNS)
            .order(ORDER_COLUMN, desc=False)
            .limit(limit)
            .execute()
        )
        return [ProductRecord(**row) for row in result.data or []]
