"""Domain service: Price Calculator.

Combines the customer policy, the discount-period flag and the item
price table into a cart total, then checks the total against the
customer's spending limit.

The clock is injected and read exactly once per computation, so the
discount-period flag cannot change halfway through a cart.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import structlog

from shopping.domain.exceptions import (
    InvalidCustomerType,
    InvalidItemType,
    LimitExceeded,
)
from shopping.domain.model.catalog import price_of
from shopping.domain.model.customer_policy import discount_rate_of, spending_limit_of
from shopping.domain.model.pricing_result import (
    PriceAccepted,
    PriceRejected,
    PriceResult,
)
from shopping.domain.model.value_objects import CartLine, CustomerType
from shopping.domain.service.discount_period import (
    Clock,
    is_discount_period,
    reference_date,
)

logger = structlog.get_logger(__name__)


class PriceCalculator:

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def compute_total(
        self,
        customer_type: str | CustomerType,
        cart_lines: Iterable[CartLine] | None,
    ) -> float:
        """Total price of *cart_lines* for *customer_type*.

        Steps:
        1. Resolve the customer policy (fails even for an absent cart).
        2. An absent cart costs 0; nothing else is evaluated.
        3. Classify today, then sum unit price x quantity x discount rate.
        4. Reject with LimitExceeded if the total is above the limit.

        Raises InvalidCustomerType, InvalidItemType or LimitExceeded.
        """
        customer = CustomerType.parse(customer_type)
        discount_rate = discount_rate_of(customer)

        if cart_lines is None:
            return 0

        today = reference_date(self._clock())
        discounted = is_discount_period(today)
        logger.debug(
            "pricing_cart",
            customer_type=customer.value,
            day=today.isoformat(),
            discount_period=discounted,
        )

        total = 0
        for line in cart_lines:
            unit_price = price_of(line.item_type, discounted)
            try:
                total += unit_price * line.quantity * discount_rate
            except OverflowError:
                # Quantity too large for a float: above every limit.
                total = math.inf

        limit = spending_limit_of(customer)
        if total > limit:
            error = LimitExceeded(total, customer.value, limit)
            logger.debug(str(error), total=total, limit=limit)
            raise error

        return total

    def quote(
        self,
        customer_type: str | CustomerType,
        cart_lines: Iterable[CartLine] | None,
    ) -> PriceResult:
        """Same computation as ``compute_total`` but returns a tagged result."""
        try:
            return PriceAccepted(self.compute_total(customer_type, cart_lines))
        except (InvalidCustomerType, InvalidItemType, LimitExceeded) as exc:
            return PriceRejected.from_error(exc)
