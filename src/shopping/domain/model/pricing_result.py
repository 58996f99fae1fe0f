"""Tagged outcome of a pricing computation.

``PriceAccepted`` carries the total; ``PriceRejected`` carries the reason
and a customer-facing message. Callers branch on the type (or on
``ok``) instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from shopping.domain.exceptions import (
    InvalidCustomerType,
    InvalidItemType,
    LimitExceeded,
    ValidationError,
)


class RejectionReason(Enum):
    INVALID_CUSTOMER_TYPE = "INVALID_CUSTOMER_TYPE"
    INVALID_ITEM_TYPE = "INVALID_ITEM_TYPE"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"


@dataclass(frozen=True)
class PriceAccepted:
    total: float

    ok = True


@dataclass(frozen=True)
class PriceRejected:
    reason: RejectionReason
    message: str
    total: float | None = None
    limit: float | None = None

    ok = False

    @staticmethod
    def from_error(error: ValidationError) -> PriceRejected:
        """Map one of the pricing errors to its tagged rejection."""
        if isinstance(error, LimitExceeded):
            return PriceRejected(
                reason=RejectionReason.LIMIT_EXCEEDED,
                message=str(error),
                total=error.total,
                limit=error.limit,
            )
        if isinstance(error, InvalidCustomerType):
            return PriceRejected(RejectionReason.INVALID_CUSTOMER_TYPE, str(error))
        if isinstance(error, InvalidItemType):
            return PriceRejected(RejectionReason.INVALID_ITEM_TYPE, str(error))
        raise TypeError(f"No rejection reason for {type(error).__name__}")


PriceResult = Union[PriceAccepted, PriceRejected]
