from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductVariant(BaseModel):
    """A sellable configuration of a product."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Unique variant identifier")
    title: str = Field(description="Variant title")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit code")
    product_id: Optional[str] = Field(default=None, description="Product this variant belongs to")


class Product(BaseModel):
    """A catalogue product grouping one or more variants."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Unique product identifier")
    title: str = Field(description="Product title")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail URL")
    variants: List[str] = Field(default_factory=list, description="Identifiers of the product's variants")


class Region(BaseModel):
    """A pricing and currency zone."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Unique region identifier")
    name: str = Field(description="Region name")
    currency_code: str = Field(description="ISO 4217 currency code used for prices in this region")


class AddOn(BaseModel):
    """An optional extra that can be attached to the products listed in valid_for."""
    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Unique add-on identifier")
    name: str = Field(description="Add-on display name")
    valid_for: List[str] = Field(default_factory=list, description="Identifiers of products the add-on may be added to")
