"""
Add-on line items

Prices cart line items for product variants with region-priced add-ons,
validates line item records and compares line item contents.
"""
from .errors import LineItemError
from .services import AddOnLineItemService

__version__ = "0.1.0"

__all__ = ["AddOnLineItemService", "LineItemError"]
