"""Application service: Get Price use case.

Turns caller input into domain values, runs the PriceCalculator and maps
its tagged result to a DTO. Malformed quantities raise ValidationError
before any pricing happens; pricing rejections come back as data.
"""

from __future__ import annotations

from shopping.application.dto import PriceQuoteDTO, PriceRequest
from shopping.domain.model.pricing_result import PriceAccepted, PriceResult
from shopping.domain.model.value_objects import CartLine
from shopping.domain.service.price_calculator import PriceCalculator


class GetPriceHandler:

    def __init__(self, calculator: PriceCalculator) -> None:
        self._calculator = calculator

    def handle(self, request: PriceRequest) -> PriceQuoteDTO:
        cart_lines = None
        if request.items is not None:
            cart_lines = [
                CartLine(item_type=spec.item_type, quantity=spec.quantity)
                for spec in request.items
            ]

        result = self._calculator.quote(request.customer_type, cart_lines)
        return self._to_dto(result)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(result: PriceResult) -> PriceQuoteDTO:
        if isinstance(result, PriceAccepted):
            return PriceQuoteDTO(accepted=True, total=format_total(result.total))
        return PriceQuoteDTO(
            accepted=False,
            total=format_total(result.total) if result.total is not None else None,
            reason=result.reason.value,
            message=result.message,
        )


def format_total(total: float) -> str:
    """Decimal string form of a raw total: ``90.0`` stays ``"90.0"``.

    No rounding is applied. A cart with nothing in it is ``"0"``.
    """
    return str(total)
