from .add_on_line_item import AddOnLineItemService

__all__ = ["AddOnLineItemService"]
