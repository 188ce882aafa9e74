"""CLI commands for supplier stock."""

from __future__ import annotations

import click

from supermarket.domain.exceptions import InfrastructureError
from supermarket.infrastructure.cli.context import CliContext


@click.command("stock")
@click.option("--manufacturer", required=True, help="Manufacturer supplying the products.")
@click.option(
    "--quantity", type=click.IntRange(min=0), default=None,
    help="Units the supplier can deliver. Omit to show the current stock.",
)
@click.pass_obj
def supplier_stock(obj: CliContext, manufacturer: str, quantity: int | None) -> None:
    """Show or set how many units a manufacturer can deliver."""
    supplier = obj.supplier_service()

    try:
        if quantity is None:
            current = supplier.stock_of(manufacturer)
        else:
            supplier.set_stock(manufacturer, quantity)
            current = quantity
    except InfrastructureError as exc:
        raise click.ClickException(str(exc))

    if current is None:
        raise click.ClickException(f"Unknown supplier '{manufacturer}'")
    click.echo(f"Supplier '{manufacturer}' stock: {current}")
