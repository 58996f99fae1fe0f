"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every pricing failure is a client-input error; nothing here is retriable.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input was malformed or broke a business rule."""


class InvalidCustomerType(ValidationError):
    """The customer type is not one of the known tiers."""

    def __init__(self, customer_type: str) -> None:
        super().__init__(f"Unknown customer type: '{customer_type}'")
        self.customer_type = customer_type


class InvalidItemType(ValidationError):
    """A cart line names an item that is not in the price table."""

    def __init__(self, item_type: str) -> None:
        super().__init__(f"Unknown item type: '{item_type}'")
        self.item_type = item_type


class LimitExceeded(ValidationError):
    """The cart total is above the spending limit of the customer tier."""

    def __init__(self, total: float, customer_type: str, limit: float) -> None:
        super().__init__(
            f"Price ({total}) is too high for {customer_type.lower()} customer"
        )
        self.total = total
        self.customer_type = customer_type
        self.limit = limit
