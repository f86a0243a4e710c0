"""
Storefront - Main FastAPI Application

Single entry point for the catalog, product and cart pages.
Deployable as one serverless function (Vercel) or with uvicorn:

    uvicorn api.index:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.cart import CartSessions
from storefront.errors import ERROR_NOT_FOUND
from storefront.logging import get_logger
from storefront.middleware import CartSessionMiddleware, SecurityHeadersMiddleware
from storefront.rendering import render
from storefront.routers import cart_router, catalog_router, pages_router
from storefront.services.database import SUPABASE_ANON_KEY, SUPABASE_URL, close_database, init_database

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    if SUPABASE_URL and SUPABASE_ANON_KEY:
        await init_database()
    else:
        logger.warning("Supabase is not configured; catalog pages will fail until it is")
    yield
    # Shutdown
    await close_database()


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render 404s as a page; other HTTP errors keep FastAPI's JSON body."""
    if exc.status_code == 404:
        return render(request, "not_found.html", {"message": exc.detail or ERROR_NOT_FOUND}, status_code=404)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront",
        description="Product catalog, product pages and session cart",
        version="1.0.0",
        lifespan=lifespan,
    )

    # One cart per browser session, in this process only
    app.state.cart_sessions = CartSessions()

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(CartSessionMiddleware)

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(pages_router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "storefront"}

    return app


app = create_app()
