from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..config import AppConfig, get_config
from ..data.interface import CatalogServices
from ..data.models import LineItem, LineItemContent, Product, Region
from ..data.models.line_items import GROUPED_CONTENT, SINGLE_CONTENT
from ..errors import LineItemError
from ..logging import get_logger


def _first_violation(error: ValidationError) -> str:
    detail = error.errors()[0]
    loc = list(detail["loc"])
    # Drop the content shape tag, e.g. content.single.unit_price -> content.unit_price
    if loc[:1] == ["content"] and loc[1:2] in ([SINGLE_CONTENT], [GROUPED_CONTENT]):
        del loc[1]
    location = ".".join(str(part) for part in loc)
    return f"{location}: {detail['msg']}" if location else detail["msg"]


def _same_content(content: LineItemContent, match: LineItemContent) -> bool:
    # Contents without a variant id have no identity to compare
    if content.variant_id is None or match.variant_id is None:
        return False
    return content.variant_id == match.variant_id and content.quantity == match.quantity


class AddOnLineItemService:
    """Prices and validates cart line items for variants with selected add-ons."""

    def __init__(self, services: CatalogServices, config: Optional[AppConfig] = None) -> None:
        self.config = config or get_config()
        self.logger = get_logger(__name__)

        self.product_variant_service = services.product_variant_service
        self.region_service = services.region_service
        self.product_service = services.product_service
        self.add_on_service = services.add_on_service

    def validate(self, raw_line_item: Union[Mapping[str, Any], LineItem]) -> LineItem:
        """Validate a line item and apply defaults.

        Args:
            raw_line_item: The candidate line item.
        Returns:
            LineItem: The normalized line item.
        Raises:
            LineItemError: INVALID_DATA carrying the first schema violation.
        """
        try:
            return LineItem.model_validate(raw_line_item)
        except ValidationError as e:
            message = _first_violation(e)
            self.logger.warning(f"Rejected line item: {message}")
            raise LineItemError(LineItemError.Types.INVALID_DATA, message) from e

    async def generate(
        self,
        variant_id: str,
        region_id: str,
        quantity: int,
        add_on_ids: Sequence[str],
    ) -> LineItem:
        """Generate a priced line item for a variant and its add-ons.

        The unit price is the variant's region price plus the region price of
        every add-on, multiplied by quantity. The content quantity is always 1.

        Args:
            variant_id: Id of the line item variant.
            region_id: Id of the cart region.
            quantity: Number of items.
            add_on_ids: Ids of the selected add-ons.
        Returns:
            LineItem: The generated line item.
        Raises:
            LineItemError: INVALID_DATA if the quantity is not positive, the
                variant has no product, or an add-on is not valid for the product.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise LineItemError(
                LineItemError.Types.INVALID_DATA,
                f"Quantity must be a positive integer, got: {quantity!r}",
            )
        add_on_ids = list(add_on_ids)

        variant = await self.product_variant_service.retrieve(variant_id)
        region = await self.region_service.retrieve(region_id)

        products = await self.product_service.list(variants=variant_id)
        # A variant cannot exist without a product
        if not products:
            self.logger.warning(f"No product found for variant {variant_id}")
            raise LineItemError(
                LineItemError.Types.INVALID_DATA,
                f"Could not find product for variant with id: {variant_id}",
            )
        product = products[0]

        unit_price = await self.product_variant_service.get_region_price(variant.id, region.id)
        add_on_prices = await self._price_add_ons(add_on_ids, product, region)
        unit_price += sum(add_on_prices)

        self.logger.debug(
            f"Generated line item for variant {variant.id} in region {region.id}: "
            f"unit price {unit_price} x {quantity}, add-ons {add_on_ids}"
        )

        return LineItem(
            title=product.title,
            quantity=quantity,
            thumbnail=product.thumbnail,
            content=LineItemContent(
                unit_price=unit_price * quantity,
                variant=variant.model_dump(),
                product=product.model_dump(),
                quantity=1,
            ),
            metadata={"add_ons": add_on_ids},
        )

    async def _price_add_ons(self, add_on_ids: Sequence[str], product: Product, region: Region) -> list:
        semaphore = asyncio.Semaphore(self.config.add_on_concurrency)

        async def price(add_on_id: str) -> float:
            async with semaphore:
                add_on = await self.add_on_service.retrieve(add_on_id)
                if str(product.id) not in {str(p) for p in add_on.valid_for}:
                    self.logger.warning(f"Add-on {add_on.id} is not valid for product {product.id}")
                    raise LineItemError(
                        LineItemError.Types.INVALID_DATA,
                        f"{add_on.name} can not be added to {product.title}",
                    )
                return await self.add_on_service.get_region_price(add_on_id, region.id)

        tasks = [asyncio.ensure_future(price(add_on_id)) for add_on_id in add_on_ids]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    def is_equal(self, line: LineItem, match: LineItem) -> bool:
        """Check whether two line items hold the same variants in the same quantities."""
        if line.has_grouped_content:
            if match.has_grouped_content and len(match.content) == len(line.content):
                return all(_same_content(c, m) for c, m in zip(line.content, match.content))
        elif not match.has_grouped_content:
            return _same_content(line.content, match.content)

        return False
