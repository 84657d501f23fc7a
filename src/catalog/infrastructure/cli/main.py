import click

from catalog.infrastructure.bootstrap import settings
from catalog.infrastructure.cli.category_commands import (
    category_activate,
    category_create,
    category_deactivate,
    category_delete,
    category_list,
    category_stats,
    category_update,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_average,
    product_by_category,
    product_delete,
    product_list,
    product_price_range,
    product_update,
)
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Catalog: categories and products."""
    configure_logging("DEBUG" if verbose else settings().log_level)


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
category.add_command(category_activate)
category.add_command(category_create)
category.add_command(category_deactivate)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_stats)
category.add_command(category_update)
product.add_command(product_add)
product.add_command(product_average)
product.add_command(product_by_category)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_price_range)
product.add_command(product_update)
