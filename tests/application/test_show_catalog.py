"""Tests for the ShowCatalog use case."""

from shopping.application.show_catalog import ShowCatalogHandler
from tests.fakes import DISCOUNT_DAY, REGULAR_DAY, FakeClock


def _prices(dto) -> dict[str, float]:
    return {item.item_type: item.unit_price for item in dto.prices}


class TestShowCatalog:

    def test_regular_day(self):
        dto = ShowCatalogHandler(FakeClock.on(REGULAR_DAY)).handle()
        assert dto.day == "2023-03-20"
        assert not dto.discount_period
        assert _prices(dto) == {"TSHIRT": 30, "DRESS": 50, "JACKET": 100}

    def test_discount_day(self):
        dto = ShowCatalogHandler(FakeClock.on(DISCOUNT_DAY)).handle()
        assert dto.discount_period
        assert _prices(dto) == {"TSHIRT": 30, "DRESS": 40, "JACKET": 90}

    def test_policies_listed(self):
        dto = ShowCatalogHandler(FakeClock.on(REGULAR_DAY)).handle()
        policies = {p.customer_type: (p.discount_rate, p.spending_limit) for p in dto.policies}
        assert policies == {
            "STANDARD": (1.0, 200),
            "PREMIUM": (0.9, 800),
            "PLATINUM": (0.5, 2000),
        }
