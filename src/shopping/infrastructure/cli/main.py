import click

from shopping.infrastructure.cli.price_commands import price_cart, show_catalog
from shopping.infrastructure.logging import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log debug events to stderr.")
@click.option("--log-json", is_flag=True, default=False, help="Log as JSON lines.")
def cli(verbose: bool, log_json: bool) -> None:
    """Shopping — cart pricing for STANDARD, PREMIUM and PLATINUM customers"""
    configure_logging(verbose=verbose, log_json=log_json)


# Register subcommands
cli.add_command(price_cart)
cli.add_command(show_catalog)
