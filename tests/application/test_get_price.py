"""Integration tests for the GetPrice use case.

Uses a fake clock — no dependency on today's date.
"""

import pytest

from shopping.application.dto import CartItemSpec, PriceRequest
from shopping.application.get_price import GetPriceHandler, format_total
from shopping.domain.exceptions import ValidationError
from shopping.domain.service.price_calculator import PriceCalculator
from tests.fakes import DISCOUNT_DAY, REGULAR_DAY, FakeClock


def _handler(day=REGULAR_DAY) -> GetPriceHandler:
    return GetPriceHandler(PriceCalculator(FakeClock.on(day)))


def _request(customer: str, *pairs: tuple[str, int]) -> PriceRequest:
    return PriceRequest(customer, [CartItemSpec(item, qty) for item, qty in pairs])


class TestGetPriceHappyPath:

    def test_empty_cart_is_zero(self):
        dto = _handler().handle(_request("STANDARD"))
        assert dto.accepted
        assert dto.total == "0"

    def test_absent_cart_is_zero(self):
        dto = _handler().handle(PriceRequest("STANDARD", None))
        assert dto.total == "0"

    def test_standard_cart(self):
        dto = _handler().handle(_request("STANDARD", ("TSHIRT", 2), ("DRESS", 1)))
        assert dto.total == "90.0"
        assert dto.reason is None

    def test_platinum_discount_period(self):
        dto = _handler(DISCOUNT_DAY).handle(_request("PLATINUM", ("JACKET", 1)))
        assert dto.total == "45.0"


class TestGetPriceRejections:

    def test_limit_exceeded(self):
        dto = _handler().handle(_request("STANDARD", ("JACKET", 4)))
        assert not dto.accepted
        assert dto.reason == "LIMIT_EXCEEDED"
        assert dto.total == "400.0"
        assert "400" in dto.message
        assert "standard" in dto.message

    def test_unknown_item(self):
        dto = _handler().handle(_request("PREMIUM", ("SOCKS", 1)))
        assert dto.reason == "INVALID_ITEM_TYPE"
        assert dto.total is None

    def test_unknown_customer(self):
        dto = _handler().handle(PriceRequest("GOLD", None))
        assert dto.reason == "INVALID_CUSTOMER_TYPE"

    def test_negative_quantity_raises(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler().handle(_request("STANDARD", ("DRESS", -1)))


class TestPriceRequestFromPayload:

    def test_full_body(self):
        request = PriceRequest.from_payload(
            {
                "type": "PREMIUM_CUSTOMER",
                "items": [{"type": "TSHIRT", "quantity": 2}, {"type": "DRESS", "quantity": 1}],
            }
        )
        assert request.customer_type == "PREMIUM_CUSTOMER"
        assert request.items == [CartItemSpec("TSHIRT", 2), CartItemSpec("DRESS", 1)]

    def test_missing_items_is_absent_cart(self):
        assert PriceRequest.from_payload({"type": "STANDARD"}).items is None

    def test_null_items_is_absent_cart(self):
        assert PriceRequest.from_payload({"type": "STANDARD", "items": None}).items is None

    def test_missing_quantity_defaults_to_zero(self):
        request = PriceRequest.from_payload({"type": "STANDARD", "items": [{"type": "DRESS"}]})
        assert request.items == [CartItemSpec("DRESS", 0)]

    def test_body_must_be_object(self):
        with pytest.raises(ValidationError, match="JSON object"):
            PriceRequest.from_payload([])

    def test_items_must_be_list(self):
        with pytest.raises(ValidationError, match="must be a list"):
            PriceRequest.from_payload({"type": "STANDARD", "items": "TSHIRT"})

    def test_item_without_type_rejected(self):
        with pytest.raises(ValidationError, match="Item #1"):
            PriceRequest.from_payload(
                {"type": "STANDARD", "items": [{"type": "DRESS"}, {"quantity": 1}]}
            )

    def test_missing_customer_type_rejected_at_pricing(self):
        request = PriceRequest.from_payload({"items": []})
        dto = _handler().handle(request)
        assert dto.reason == "INVALID_CUSTOMER_TYPE"


class TestFormatTotal:

    def test_float_keeps_trailing_zero(self):
        assert format_total(225.0) == "225.0"

    def test_no_rounding(self):
        assert format_total(0.1 + 0.2) == "0.30000000000000004"
