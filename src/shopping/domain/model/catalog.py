"""Item price table.

Prices are fixed for this version of the catalog. DRESS and JACKET are
cheaper during a discount period; TSHIRT is not affected.
"""

from __future__ import annotations

from types import MappingProxyType

from shopping.domain.model.value_objects import ItemPriceEntry, ItemType

ITEM_PRICES = MappingProxyType(
    {
        ItemType.TSHIRT: ItemPriceEntry(regular=30, discounted=30),
        ItemType.DRESS: ItemPriceEntry(regular=50, discounted=40),
        ItemType.JACKET: ItemPriceEntry(regular=100, discounted=90),
    }
)


def price_of(item_type: str | ItemType, is_discount_period: bool) -> float:
    """Unit price of *item_type* for the given period.

    Raises InvalidItemType for labels that are not in the table.
    """
    return ITEM_PRICES[ItemType.parse(item_type)].price(is_discount_period)
