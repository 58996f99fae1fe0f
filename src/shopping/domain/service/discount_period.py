"""Domain service: Discount Period classification.

A discount period runs from the 6th to the 14th (inclusive) of January
and of June. The calendar day is always read in the shop's reference
timezone, whatever timezone the caller's clock reports in.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

REFERENCE_TIMEZONE = ZoneInfo("Europe/Paris")

DISCOUNT_MONTHS = frozenset({1, 6})
FIRST_DISCOUNT_DAY = 6
LAST_DISCOUNT_DAY = 14

Clock = Callable[[], datetime]


def reference_date(instant: datetime) -> date:
    """Calendar date of *instant* in the reference timezone.

    Naive datetimes are assumed to already be reference-local.
    """
    if instant.tzinfo is None:
        return instant.date()
    return instant.astimezone(REFERENCE_TIMEZONE).date()


def is_discount_period(day: date) -> bool:
    return (
        day.month in DISCOUNT_MONTHS
        and FIRST_DISCOUNT_DAY <= day.day <= LAST_DISCOUNT_DAY
    )
