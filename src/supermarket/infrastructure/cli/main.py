from __future__ import annotations

import logging
from pathlib import Path

import click

from supermarket.domain.constants import MAX_QUANTITY_IN_ORDER
from supermarket.infrastructure.bootstrap import DATA_DIR_ENV
from supermarket.infrastructure.cli.context import CliContext
from supermarket.infrastructure.cli.product_commands import (
    product_create,
    product_list,
    product_order,
    product_show,
)
from supermarket.infrastructure.cli.supplier_commands import supplier_stock


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding products.json and suppliers.json.",
)
@click.option(
    "--max-order-quantity",
    type=click.IntRange(min=0),
    envvar="SUPERMARKET_MAX_ORDER_QUANTITY",
    default=MAX_QUANTITY_IN_ORDER,
    show_default=True,
    help="Largest quantity accepted in a single order.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, max_order_quantity: int, verbose: bool) -> None:
    """SuperMarket: product catalog and ordering."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext(data_dir=data_dir, max_order_quantity=max_order_quantity)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def supplier() -> None:
    """Manage supplier stock."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_list)
product.add_command(product_order)
product.add_command(product_show)
supplier.add_command(supplier_stock)
