"""Application service: Show Catalog use case."""

from __future__ import annotations

from datetime import date

from shopping.application.dto import CatalogDTO, CustomerPolicyDTO, ItemPriceDTO
from shopping.domain.model.catalog import ITEM_PRICES
from shopping.domain.model.customer_policy import CUSTOMER_POLICIES
from shopping.domain.service.discount_period import (
    Clock,
    is_discount_period,
    reference_date,
)


class ShowCatalogHandler:

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def handle(self) -> CatalogDTO:
        """List the unit prices in effect today and every customer policy."""
        today: date = reference_date(self._clock())
        discounted = is_discount_period(today)

        return CatalogDTO(
            day=today.isoformat(),
            discount_period=discounted,
            prices=[
                ItemPriceDTO(item_type=item.value, unit_price=entry.price(discounted))
                for item, entry in ITEM_PRICES.items()
            ],
            policies=[
                CustomerPolicyDTO(
                    customer_type=customer.value,
                    discount_rate=policy.discount_rate,
                    spending_limit=policy.spending_limit,
                )
                for customer, policy in CUSTOMER_POLICIES.items()
            ],
        )
