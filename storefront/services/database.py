"""
Supabase Database Service

Usage:
    from storefront.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    # In request handlers:
    db = get_database()
    page = await db.catalog.list_products(query)
"""

import asyncio
import os
from typing import Optional

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from storefront.errors import ERROR_DATABASE_NOT_INITIALIZED, ERROR_SUPABASE_NOT_CONFIGURED
from storefront.logging import get_logger
from storefront.services.domains import CatalogService
from storefront.services.repositories import ProductRepository, TaxonomyRepository

logger = get_logger(__name__)

SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
# The storefront only reads public catalog tables; the anon key is enough
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY") or os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")


class Database:
    """
    Supabase access for the storefront.

    Must be built through ``Database.create()`` or ``init_database()``
    because the async client is created asynchronously.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

        self.products = ProductRepository(self.client)
        self.taxonomy = TaxonomyRepository(self.client)

        self.catalog = CatalogService(self)

    @classmethod
    async def create(cls, url: str | None = None, key: str | None = None) -> "Database":
        """Async factory: create the Supabase client and wire repositories."""
        url = url or SUPABASE_URL
        key = key or SUPABASE_ANON_KEY
        if not url or not key:
            raise ValueError(ERROR_SUPABASE_NOT_CONFIGURED)

        client = await acreate_client(url, key)
        return cls(client)


# Singleton instance (initialized lazily or at startup via init_database())
_db: Database | None = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize the database singleton (idempotent)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized")
    return _db


async def close_database() -> None:
    """Drop the singleton at shutdown."""
    global _db
    if _db is not None:
        _db = None
        logger.info("Supabase client released")


async def get_database_async() -> Database:
    """Database with lazy initialization, for contexts without a lifespan."""
    if _db is None:
        return await init_database()
    return _db


def get_database() -> Database:
    """
    Get the database singleton.

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)
    return _db


def set_database(db: Database | None) -> None:
    """Install a ready-made Database (tests, scripts)."""
    global _db
    _db = db
