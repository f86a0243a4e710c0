"""
Repository Pattern for Database Operations

- ProductRepository: catalog pages, product lookup, featured products
- TaxonomyRepository: vendors and categories
"""
from .product_repo import ProductRepository
from .taxonomy_repo import TaxonomyRepository

__all__ = [
    "ProductRepository",
    "TaxonomyRepository",
]
