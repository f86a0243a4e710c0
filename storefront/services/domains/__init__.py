"""Domain services wrapping repositories."""
from .catalog import CatalogPage, CatalogService, Sidebar, Storefront

__all__ = [
    "CatalogPage",
    "CatalogService",
    "Sidebar",
    "Storefront",
]
