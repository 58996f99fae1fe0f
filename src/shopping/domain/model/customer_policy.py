"""Customer policy table: discount rate and spending limit per tier."""

from __future__ import annotations

from types import MappingProxyType

from shopping.domain.model.value_objects import CustomerType, PricingPolicy

CUSTOMER_POLICIES = MappingProxyType(
    {
        CustomerType.STANDARD: PricingPolicy(discount_rate=1.0, spending_limit=200),
        CustomerType.PREMIUM: PricingPolicy(discount_rate=0.9, spending_limit=800),
        CustomerType.PLATINUM: PricingPolicy(discount_rate=0.5, spending_limit=2000),
    }
)


def policy_of(customer_type: str | CustomerType) -> PricingPolicy:
    """Return the policy for *customer_type*.

    Both the discount rate and the spending limit come from this single
    lookup, so an unknown tier is always rejected with InvalidCustomerType
    rather than falling back to a default limit.
    """
    return CUSTOMER_POLICIES[CustomerType.parse(customer_type)]


def discount_rate_of(customer_type: str | CustomerType) -> float:
    return policy_of(customer_type).discount_rate


def spending_limit_of(customer_type: str | CustomerType) -> float:
    return policy_of(customer_type).spending_limit
