"""CLI commands for cart pricing."""

from __future__ import annotations

import json
from datetime import datetime

import click

from shopping.application.dto import CartItemSpec, PriceRequest
from shopping.application.get_price import GetPriceHandler
from shopping.application.show_catalog import ShowCatalogHandler
from shopping.domain.exceptions import DomainException
from shopping.infrastructure.bootstrap import fixed_clock, price_calculator, system_clock

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'TSHIRT:2,DRESS:1' into CartItemSpec list. '' is an empty cart."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemType:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{name}'."
            )
        specs.append(CartItemSpec(item_type=name.strip(), quantity=qty))
    return specs


def _read_request(request_file) -> PriceRequest:
    try:
        payload = json.load(request_file)
    except ValueError as exc:
        raise click.BadParameter(f"Request is not valid JSON: {exc}")
    return PriceRequest.from_payload(payload)


def _clock_for(day: datetime | None):
    return fixed_clock(day.date()) if day is not None else system_clock


@click.command("price")
@click.option("--customer", default=None, help="Customer type (STANDARD, PREMIUM, PLATINUM).")
@click.option("--items", default=None, help="Items as 'ItemType:Qty,ItemType:Qty'.")
@click.option(
    "--request",
    "request_file",
    type=click.File("r"),
    default=None,
    help="JSON request body with 'type' and 'items' (use - for stdin).",
)
@click.option("--date", "day", type=_DATE, default=None, help="Price as of this day (YYYY-MM-DD).")
def price_cart(
    customer: str | None,
    items: str | None,
    request_file,
    day: datetime | None,
) -> None:
    """Compute the total price of a cart."""
    if request_file is not None and (customer or items is not None):
        raise click.UsageError("--request cannot be combined with --customer or --items")

    handler = GetPriceHandler(calculator=price_calculator(_clock_for(day)))

    try:
        if request_file is not None:
            request = _read_request(request_file)
        else:
            if not customer:
                raise click.UsageError("Missing option '--customer' (or use --request)")
            specs = _parse_items(items) if items is not None else None
            request = PriceRequest(customer_type=customer, items=specs)
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.accepted:
        raise click.ClickException(dto.message)

    click.echo(dto.total)


@click.command("catalog")
@click.option("--date", "day", type=_DATE, default=None, help="Show prices for this day (YYYY-MM-DD).")
def show_catalog(day: datetime | None) -> None:
    """Show unit prices for the day and the customer policies."""
    dto = ShowCatalogHandler(clock=_clock_for(day)).handle()

    period = "discount period" if dto.discount_period else "regular prices"
    click.echo(f"Prices for {dto.day} ({period})")
    click.echo(f"  {'Item':<10} {'Price':>8}")
    click.echo(f"  {'-'*19}")
    for item in dto.prices:
        click.echo(f"  {item.item_type:<10} {item.unit_price:>8}")
    click.echo()
    click.echo(f"  {'Customer':<10} {'Rate':>6} {'Limit':>8}")
    click.echo(f"  {'-'*26}")
    for policy in dto.policies:
        click.echo(
            f"  {policy.customer_type:<10} {policy.discount_rate:>6} {policy.spending_limit:>8}"
        )
