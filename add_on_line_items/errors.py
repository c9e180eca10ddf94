from __future__ import annotations

from enum import Enum


class LineItemError(Exception):
    """Error raised when line item data is invalid or cannot be resolved."""

    class Types(str, Enum):
        INVALID_DATA = "invalid_data"
        NOT_FOUND = "not_found"

    def __init__(self, type: LineItemError.Types, message: str) -> None:
        super().__init__(message)
        self.type = type
        self.message = message

    def __repr__(self) -> str:
        return f"LineItemError(type={self.type.value!r}, message={self.message!r})"
