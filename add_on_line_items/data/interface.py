from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from .models import AddOn, Product, ProductVariant, Region


# ---- Collaborator protocols ----

class ProductVariantService(Protocol):
    """Variant lookups and region pricing supplied by the host platform."""

    async def retrieve(self, variant_id: str) -> ProductVariant:
        """Get a variant by id."""
        ...

    async def get_region_price(self, variant_id: str, region_id: str) -> float:
        """Get the variant's unit price in a region."""
        ...


class RegionService(Protocol):

    async def retrieve(self, region_id: str) -> Region:
        """Get a region by id."""
        ...


class ProductService(Protocol):

    async def list(self, variants: str) -> List[Product]:
        """List the products that own the given variant."""
        ...


class AddOnService(Protocol):
    """Add-on lookups and region pricing supplied by the host platform."""

    async def retrieve(self, add_on_id: str) -> AddOn:
        """Get an add-on by id."""
        ...

    async def get_region_price(self, add_on_id: str, region_id: str) -> float:
        """Get the add-on's price in a region."""
        ...


# ---- Capability set ----

@dataclass(frozen=True)
class CatalogServices:
    """
    The lookups line item generation depends on.

    Implementations MUST NOT write or emit events from these methods;
    generation is read-only.
    """
    product_variant_service: ProductVariantService
    region_service: RegionService
    product_service: ProductService
    add_on_service: AddOnService
