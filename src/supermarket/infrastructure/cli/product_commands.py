"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from supermarket.application.dto import ProductDefinition
from supermarket.domain.exceptions import InfrastructureError
from supermarket.infrastructure.cli.context import CliContext, raise_for_response


@click.command("create")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--category", required=True, help="Product category.")
@click.option("--name", required=True, help="Product name.")
@click.option("--manufacturer", required=True, help="Manufacturer name.")
@click.option("--importer-email", default=None, help="Importer contact email.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_create(
    obj: CliContext,
    product_id: int,
    category: str,
    name: str,
    manufacturer: str,
    importer_email: str | None,
    quantity: int,
) -> None:
    """Add a new product to the catalog."""
    definition = ProductDefinition(
        product_id=product_id,
        category=category,
        name=name,
        manufacturer=manufacturer,
        importer_email=importer_email,
        quantity=quantity,
    )
    response = obj.product_service().create_product(definition)
    raise_for_response(response)

    click.echo(f"Product #{product_id} '{name.strip()}' created ({quantity} in stock)")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
@click.pass_obj
def product_show(obj: CliContext, product_id: int) -> None:
    """Show details of a product."""
    response = obj.product_service().get_product(product_id)
    raise_for_response(response)

    dto: ProductDefinition = response.body
    click.echo(f"Product #{dto.product_id}")
    click.echo(f"Name:         {dto.name}")
    click.echo(f"Category:     {dto.category}")
    click.echo(f"Manufacturer: {dto.manufacturer}")
    click.echo(f"Importer:     {dto.importer_email or '-'}")
    click.echo(f"In stock:     {dto.quantity}")


@click.command("list")
@click.pass_obj
def product_list(obj: CliContext) -> None:
    """List all products in the catalog."""
    try:
        products = obj.product_repository().list_all()
    except InfrastructureError as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Manufacturer':<20} {'Stock':>6}")
    click.echo("-" * 55)
    for p in sorted(products, key=lambda p: p.product_id):
        click.echo(
            f"{p.product_id:<6} {p.name.value:<20} {p.manufacturer.value:<20} {p.quantity:>6}"
        )


@click.command("order")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to order.")
@click.option("--quantity", required=True, type=int, help="Units to order.")
@click.pass_obj
def product_order(obj: CliContext, product_id: int, quantity: int) -> None:
    """Order units of a product, restocking from the supplier if needed."""
    response = obj.product_service().order(product_id, quantity)
    raise_for_response(response)

    click.echo(f"Ordered {quantity} of product #{product_id}")
