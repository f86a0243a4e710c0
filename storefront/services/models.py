"""Database Models - Pydantic models for catalog rows."""
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.services.money import to_price

# Supabase tables may use bigint or uuid primary keys
RowId = Union[int, str]


class ProductRecord(BaseModel):
    """Product row as returned by the products table."""

    model_config = ConfigDict(extra="ignore")

    id: RowId
    slug: str
    name: str
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    vendor_id: Optional[RowId] = None
    category_id: Optional[RowId] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_price(v)

    @property
    def has_price(self) -> bool:
        return self.price is not None


class Vendor(BaseModel):
    """Vendor row used for sidebar and home page links."""

    model_config = ConfigDict(extra="ignore")

    id: RowId
    name: str


class Category(BaseModel):
    """Category row used for sidebar and home page links."""

    model_config = ConfigDict(extra="ignore")

    id: RowId
    name: str
