"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import CreateProductDTO, UpdateProductDTO
from catalog.application.list_products import (
    FindProductsByCategoryHandler,
    ListProductsHandler,
)
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Price
from catalog.infrastructure.bootstrap import product_domain_service, product_repository


def _parse_price(raw: str) -> float:
    try:
        return Price.of(raw).value
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--price")


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<41} {'Name':<24} {'Category':<16} {'Price':>14}")
    click.echo("-" * 98)
    for p in products:
        click.echo(
            f"{p.id:<41} {p.name.value:<24} {p.category_id.value:<16} {p.price.format():>14}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--description", default="", help="Free-form description.")
def product_add(name: str, price: str, category_id: str, description: str) -> None:
    """Add a new product to the catalog."""
    dto = CreateProductDTO(
        name=name,
        price=_parse_price(price),
        category_id=category_id,
        description=description,
    )
    try:
        handler = CreateProductHandler(
            product_repo=product_repository(),
            domain_service=product_domain_service(),
        )
        product = handler.handle(dto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price.format()}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    _print_products(ListProductsHandler(product_repository()).handle())


@click.command("by-category")
@click.option("--category", "category_id", required=True, help="Category ID.")
def product_by_category(category_id: str) -> None:
    """List the products in one category."""
    _print_products(FindProductsByCategoryHandler(product_repository()).handle(category_id))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--category", "category_id", required=True, help="New category ID.")
@click.option("--description", default="", help="New description.")
def product_update(
    product_id: str, name: str, price: str, category_id: str, description: str
) -> None:
    """Replace a product's name, price, category and description."""
    handler = UpdateProductHandler(product_repo=product_repository())

    dto = UpdateProductDTO(
        id=product_id,
        name=name,
        price=_parse_price(price),
        category_id=category_id,
        description=description,
    )
    try:
        product = handler.handle(dto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("price-range")
@click.option("--category", "category_id", required=True, help="Category ID.")
def product_price_range(category_id: str) -> None:
    """Show the acceptable price band for a category."""
    try:
        band = product_domain_service().get_price_range_for_category(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"{category_id}: {Price(band.min).format()} - {Price(band.max).format()}")


@click.command("average")
@click.option("--category", "category_id", required=True, help="Category ID.")
def product_average(category_id: str) -> None:
    """Show the average product price in a category."""
    try:
        average = product_domain_service().get_average_price_for_category(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if average is None:
        click.echo(f"No products in category {category_id}.")
        return
    click.echo(f"{category_id}: average {Price(average).format()}")
