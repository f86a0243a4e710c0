"""
Catalog Domain Service

Everything the storefront pages read from the backend:
- paginated, filtered product listing
- single product lookup by slug
- sidebar vendor/category lists (never fail the page)
- landing page sections
"""

from dataclasses import dataclass, field

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError

from storefront.errors import ERROR_PRODUCTS_UNAVAILABLE
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.catalog_query import CatalogQuery, total_pages
from storefront.services.models import Category, ProductRecord, Vendor

logger = get_logger(__name__)

# Failures of a single query: the request itself, or rows that do not
# fit the catalog models (e.g. a product without a name)
BACKEND_ERRORS = (APIError, httpx.HTTPError, ValidationError)

FEATURED_LIMIT = 8


@dataclass
class CatalogPage:
    """One rendered page of /products."""

    query: CatalogQuery
    products: list[ProductRecord] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 1
    error: str | None = None

    @property
    def current_page(self) -> int:
        return self.query.page

    @property
    def is_empty(self) -> bool:
        return not self.products


@dataclass
class Sidebar:
    """Filter links for the layout shell."""

    vendors: list[Vendor] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)


@dataclass
class Storefront:
    """Landing page sections; an empty section is simply not shown."""

    categories: list[Category] = field(default_factory=list)
    vendors: list[Vendor] = field(default_factory=list)
    featured: list[ProductRecord] = field(default_factory=list)


def _error_message(error: Exception) -> str:
    if isinstance(error, ValidationError):
        # Field-by-field pydantic output is for the log, not the page
        return f"invalid {error.title} data"
    return getattr(error, "message", None) or str(error) or type(error).__name__


class CatalogService:
    """
    Catalog domain service.

    Each public method performs exactly one round of backend queries;
    nothing is cached between requests and nothing is retried.
    """

    def __init__(self, db):
        self.db = db

    async def list_products(self, query: CatalogQuery) -> CatalogPage:
        """
        Fetch one catalog page.

        Backend errors do not propagate: they are reported on
        ``CatalogPage.error`` and shown inline.
        """
        try:
            products, count = await self.db.products.list_page(query)
        except BACKEND_ERRORS as e:
            logger.error(
                f"Catalog query failed (q={sanitize_string_for_logging(query.search)}, "
                f"page={query.page}): {e}"
            )
            return CatalogPage(query=query, error=f"{ERROR_PRODUCTS_UNAVAILABLE}: {_error_message(e)}")

        return CatalogPage(
            query=query,
            products=products,
            total_count=count,
            total_pages=total_pages(count, query.page_size),
        )

    async def get_product(self, slug: str) -> ProductRecord | None:
        """
        Look up one product by slug.

        A failed query is treated like a missing product.
        """
        try:
            return await self.db.products.get_by_slug(slug)
        except BACKEND_ERRORS as e:
            logger.warning(f"Product lookup failed for {sanitize_string_for_logging(slug)}: {e}")
            return None

    async def get_sidebar(self) -> Sidebar:
        """Vendor and category links; any failure leaves both lists empty."""
        try:
            vendors = await self.db.taxonomy.list_vendors()
            categories = await self.db.taxonomy.list_categories()
        except Exception as e:
            logger.warning(f"Sidebar data unavailable: {e}")
            return Sidebar()
        return Sidebar(vendors=vendors, categories=categories)

    async def get_storefront(self) -> Storefront:
        """Categories, vendors and featured products for the home page."""
        storefront = Storefront()

        try:
            storefront.categories = await self.db.taxonomy.list_categories()
        except BACKEND_ERRORS as e:
            logger.warning(f"Home page categories unavailable: {e}")

        try:
            storefront.vendors = await self.db.taxonomy.list_vendors()
        except BACKEND_ERRORS as e:
            logger.warning(f"Home page vendors unavailable: {e}")

        try:
            storefront.featured = await self.db.products.get_featured(FEATURED_LIMIT)
        except BACKEND_ERRORS as e:
            logger.warning(f"Featured products unavailable: {e}")

        return storefront
