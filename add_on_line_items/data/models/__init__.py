from .catalog import (
    AddOn,
    Product,
    ProductVariant,
    Region,
)

from .line_items import (
    LineItem,
    LineItemContent,
)

__all__ = [
    # Catalogue records
    "AddOn",
    "Product",
    "ProductVariant",
    "Region",
    # Line items
    "LineItem",
    "LineItemContent",
]
