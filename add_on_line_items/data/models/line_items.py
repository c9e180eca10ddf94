from __future__ import annotations

from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, StrictBool, StrictFloat, StrictInt, StrictStr, Tag, conlist

# Tags naming the two content shapes; they appear in validation error locations
SINGLE_CONTENT = "single"
GROUPED_CONTENT = "group"


def _content_shape(value: Any) -> str:
    return GROUPED_CONTENT if isinstance(value, (list, tuple)) else SINGLE_CONTENT


class LineItemContent(BaseModel):
    """A priced variant inside a line item."""
    # Strict: numeric strings and bools are rejected rather than coerced
    unit_price: Union[StrictInt, StrictFloat] = Field(description="Price of the content, already multiplied by the line quantity")
    variant: Dict[str, Any] = Field(description="The product variant of the content")
    product: Dict[str, Any] = Field(description="The product of the content")
    quantity: StrictInt = Field(default=1, ge=1, description="Quantity of the variant inside one line unit")

    @property
    def variant_id(self) -> Any:
        return self.variant.get("id")


class LineItem(BaseModel):
    """A priced, quantified cart or order entry."""
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(min_length=1, description="Line item title")
    is_giftcard: Optional[StrictBool] = Field(default=None, description="Whether the line item is a gift card")
    description: Optional[StrictStr] = Field(default=None, description="Line item description, may be empty")
    thumbnail: Optional[StrictStr] = Field(default=None, description="Thumbnail URL, may be empty")
    content: Annotated[
        Union[
            Annotated[LineItemContent, Tag(SINGLE_CONTENT)],
            Annotated[conlist(LineItemContent, min_length=1), Tag(GROUPED_CONTENT)],
        ],
        Discriminator(_content_shape),
    ] = Field(description="A single content record or an ordered group of them")
    # Strict: numeric strings and bools are rejected rather than coerced
    quantity: StrictInt = Field(ge=1, description="Number of line units")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Free-form metadata, e.g. selected add-ons")

    @property
    def has_grouped_content(self) -> bool:
        return isinstance(self.content, list)
