"""Taxonomy Repository - vendors and categories."""
from typing import List

from storefront.services.models import Category, Vendor

from .base import BaseRepository


class TaxonomyRepository(BaseRepository):
    """Vendor and category lookups, always ordered by name."""

    async def list_vendors(self) -> List[Vendor]:
        result = await self.client.table("vendors").select("id,name").order("name", desc=False).execute()
        return [Vendor(**row) for row in result.data or []]

    async def list_categories(self) -> List[Category]:
        result = await self.client.table("categories").select("id,name").order("name", desc=False).execute()
        return [Category(**row) for row in result.data or []]
