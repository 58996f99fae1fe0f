"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shopping.domain.exceptions import (
    InvalidCustomerType,
    InvalidItemType,
    ValidationError,
)

# Labels used by the first version of the shopping API, e.g. "PREMIUM_CUSTOMER".
_LEGACY_CUSTOMER_SUFFIX = "_CUSTOMER"


class ItemType(Enum):
    TSHIRT = "TSHIRT"
    DRESS = "DRESS"
    JACKET = "JACKET"

    @classmethod
    def parse(cls, label: str | ItemType) -> ItemType:
        """Resolve a raw label, raising InvalidItemType if it is unknown."""
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            raise InvalidItemType(str(label)) from None


class CustomerType(Enum):
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
    PLATINUM = "PLATINUM"

    @classmethod
    def parse(cls, label: str | CustomerType) -> CustomerType:
        """Resolve a raw label, raising InvalidCustomerType if it is unknown.

        Accepts both the tier name (``"PREMIUM"``) and the legacy
        ``"PREMIUM_CUSTOMER"`` form. Matching is case-sensitive.
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            raise InvalidCustomerType(str(label))

        name = label
        if name.endswith(_LEGACY_CUSTOMER_SUFFIX):
            name = name[: -len(_LEGACY_CUSTOMER_SUFFIX)]
        try:
            return cls(name)
        except ValueError:
            raise InvalidCustomerType(label) from None


@dataclass(frozen=True)
class CartLine:
    """One line of a cart: an item label and how many of it.

    ``item_type`` stays a raw label until pricing time so that an unknown
    item is reported by the price table, after the customer type has been
    checked. A quantity of zero is legal and contributes nothing.
    """

    item_type: str
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(
                f"Quantity cannot be negative, got {self.quantity} for {self.item_type}"
            )


@dataclass(frozen=True)
class PricingPolicy:
    """Discount rate and spending limit attached to a customer tier."""

    discount_rate: float
    spending_limit: float

    def __post_init__(self) -> None:
        if not 0 < self.discount_rate <= 1:
            raise ValidationError(
                f"Discount rate must be in (0, 1], got {self.discount_rate}"
            )
        if self.spending_limit <= 0:
            raise ValidationError(
                f"Spending limit must be positive, got {self.spending_limit}"
            )


@dataclass(frozen=True)
class ItemPriceEntry:
    """Regular and discount-period unit prices for one item type."""

    regular: float
    discounted: float

    def price(self, is_discount_period: bool) -> float:
        return self.discounted if is_discount_period else self.regular
