"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about the real clock.
Every other module receives one.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone

from shopping.domain.service.discount_period import REFERENCE_TIMEZONE, Clock
from shopping.domain.service.price_calculator import PriceCalculator


def system_clock() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(day: date) -> Clock:
    """A clock frozen at noon of *day* in the reference timezone."""
    instant = datetime.combine(day, time(12, 0), tzinfo=REFERENCE_TIMEZONE)
    return lambda: instant


def price_calculator(clock: Clock | None = None) -> PriceCalculator:
    return PriceCalculator(clock or system_clock)
