"""
Catalog Router

Public HTML pages: landing page, product listing, product detail and the
"Add to cart" form post.
"""

from typing import Optional
from urllib.parse import quote, urlencode

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from storefront.cart import add_to_cart, use_cart
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.rendering import render
from storefront.services.catalog_query import CatalogQuery, build_catalog_query
from storefront.services.database import Database

from .deps import get_db, provide_cart

logger = get_logger(__name__)

router = APIRouter(tags=["catalog"], dependencies=[Depends(provide_cart)])


def _page_links(query: CatalogQuery, total_pages: int) -> list[dict]:
    return [
        {
            "number": number,
            "href": "/products?" + urlencode(query.page_params(number)),
            "current": number == query.page,
        }
        for number in range(1, total_pages + 1)
    ]


@router.get("/")
async def home(request: Request, db: Database = Depends(get_db)):
    """Landing page: categories, vendors and featured products."""
    storefront = await db.catalog.get_storefront()
    return render(request, "home.html", {"storefront": storefront}, cart=use_cart())


@router.get("/products")
async def products(
    request: Request,
    q: Optional[str] = None,
    vendor: Optional[str] = None,
    category: Optional[str] = None,
    page: Optional[str] = None,
    db: Database = Depends(get_db),
):
    """Filtered, paginated product grid inside the layout shell."""
    query = build_catalog_query(q=q, vendor=vendor, category=category, page=page)
    catalog_page = await db.catalog.list_products(query)
    sidebar = await db.catalog.get_sidebar()

    return render(
        request,
        "products.html",
        {
            "page": catalog_page,
            "sidebar": sidebar,
            "page_links": _page_links(query, catalog_page.total_pages),
            "search": query.search or "",
        },
        cart=use_cart(),
    )


@router.get("/product/{slug}")
async def product_detail(request: Request, slug: str, added: bool = False, db: Database = Depends(get_db)):
    """Product page; unknown slugs are a 404."""
    product = await db.catalog.get_product(slug)
    if product is None:
        logger.info(f"Product page not found: {sanitize_string_for_logging(slug)}")
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    return render(request, "product.html", {"product": product, "added": added}, cart=use_cart())


@router.post("/product/{slug}/cart")
async def product_add_to_cart(slug: str, db: Database = Depends(get_db)):
    """Add one unit of the product to the visitor's cart."""
    product = await db.catalog.get_product(slug)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    url = f"/product/{quote(product.slug)}"
    if add_to_cart(product) is not None:
        url += "?added=1"
    return RedirectResponse(url=url, status_code=303)
