"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shopping.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one requested item (item type label + quantity)."""

    item_type: str
    quantity: int


@dataclass(frozen=True)
class PriceRequest:
    """Input: a customer type and an optional list of items.

    ``items`` is None when the caller sent no cart at all, which is
    different from an empty cart.
    """

    customer_type: str
    items: list[CartItemSpec] | None

    @staticmethod
    def from_payload(payload: Any) -> PriceRequest:
        """Build a request from a decoded JSON body.

        Expected shape::

            {"type": "PREMIUM_CUSTOMER",
             "items": [{"type": "DRESS", "quantity": 2}, ...]}
        """
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        raw_items = payload.get("items")
        if raw_items is None:
            return PriceRequest(customer_type=payload.get("type"), items=None)
        if not isinstance(raw_items, list):
            raise ValidationError("'items' must be a list")

        items: list[CartItemSpec] = []
        for position, raw in enumerate(raw_items):
            if not isinstance(raw, dict) or "type" not in raw:
                raise ValidationError(f"Item #{position} has no 'type'")
            items.append(
                CartItemSpec(item_type=raw["type"], quantity=raw.get("quantity", 0))
            )
        return PriceRequest(customer_type=payload.get("type"), items=items)


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: the priced cart, or why it was rejected."""

    accepted: bool
    total: str | None  # decimal string, e.g. "90.0"
    reason: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class ItemPriceDTO:
    item_type: str
    unit_price: float


@dataclass(frozen=True)
class CustomerPolicyDTO:
    customer_type: str
    discount_rate: float
    spending_limit: float


@dataclass(frozen=True)
class CatalogDTO:
    """Output: prices in effect on one day plus every customer policy."""

    day: str
    discount_period: bool
    prices: list[ItemPriceDTO]
    policies: list[CustomerPolicyDTO]
