"""
Catalog Query Builder

Turns the ``/products`` query string (``q``, ``vendor``, ``category``,
``page``) into PostgREST filters. Filtering, ordering and counting are done
by the backend; this module only decides which calls to make.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

PAGE_SIZE = 12
ORDER_COLUMN = "name"
# Larger page numbers are clamped; they only ever render an empty page
MAX_PAGE = 1_000_000

_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")


def parse_page(raw: Any) -> int:
    """
    Parse the ``page`` query parameter.

    Leading digits win ("3abc" -> 3); absent, non-numeric and values
    below 1 all fall back to page 1. Values above MAX_PAGE become MAX_PAGE.
    """
    if raw is None:
        return 1
    if isinstance(raw, int):
        return min(raw, MAX_PAGE) if raw >= 1 else 1
    match = _LEADING_INT.match(str(raw))
    if not match:
        return 1
    sign, digits = match.groups()
    if sign == "-":
        return 1
    # Never hand int() an arbitrarily long digit string
    if len(digits) > len(str(MAX_PAGE)):
        return MAX_PAGE
    page = int(digits)
    if page < 1:
        return 1
    return min(page, MAX_PAGE)


def total_pages(total_count: Optional[int], page_size: int = PAGE_SIZE) -> int:
    """Number of pagination links to show; never less than 1."""
    return max(1, math.ceil((total_count or 0) / page_size))


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class CatalogQuery:
    """Filters and window for one catalog page."""

    search: Optional[str] = None
    vendor_id: Optional[str] = None
    category_id: Optional[str] = None
    page: int = 1
    page_size: int = PAGE_SIZE

    @property
    def range_start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def range_end(self) -> int:
        # PostgREST ranges are inclusive
        return self.range_start + self.page_size - 1

    @property
    def search_pattern(self) -> Optional[str]:
        return f"%{self.search}%" if self.search else None

    def apply(self, request):
        """Apply filters, ordering and the page window to a select() builder."""
        if self.search:
            request = request.ilike("name", self.search_pattern)
        if self.vendor_id:
            request = request.eq("vendor_id", self.vendor_id)
        if self.category_id:
            request = request.eq("category_id", self.category_id)
        return request.order(ORDER_COLUMN, desc=False).range(self.range_start, self.range_end)

    def page_params(self, page: int) -> Dict[str, str]:
        """Query-string parameters linking to ``page`` with the same filters."""
        params: Dict[str, str] = {}
        if self.search:
            params["q"] = self.search
        if self.vendor_id:
            params["vendor"] = self.vendor_id
        if self.category_id:
            params["category"] = self.category_id
        params["page"] = str(page)
        return params


def build_catalog_query(
    q: Optional[str] = None,
    vendor: Optional[str] = None,
    category: Optional[str] = None,
    page: Any = None,
) -> CatalogQuery:
    """Build a CatalogQuery from raw query-string values."""
    return CatalogQuery(
        search=_clean(q),
        vendor_id=_clean(vendor),
        category_id=_clean(category),
        page=parse_page(page),
    )
