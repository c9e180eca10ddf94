from .interface import (
    AddOnService,
    CatalogServices,
    ProductService,
    ProductVariantService,
    RegionService,
)

__all__ = [
    "AddOnService",
    "CatalogServices",
    "ProductService",
    "ProductVariantService",
    "RegionService",
]
