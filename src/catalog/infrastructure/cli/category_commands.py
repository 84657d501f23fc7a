"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from catalog.application.change_category_status import ChangeCategoryStatusHandler
from catalog.application.create_category import CreateCategoryHandler
from catalog.application.delete_category import DeleteCategoryHandler
from catalog.application.dto import CreateCategoryDTO, UpdateCategoryDTO
from catalog.application.list_categories import (
    CategoryStatisticsHandler,
    ListCategoriesHandler,
)
from catalog.application.update_category import UpdateCategoryHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_domain_service, category_repository


@click.command("create")
@click.option("--name", required=True, help="Category name.")
@click.option("--description", default="", help="Free-form description.")
def category_create(name: str, description: str) -> None:
    """Create a new category."""
    handler = CreateCategoryHandler(
        category_repo=category_repository(),
        domain_service=category_domain_service(),
    )

    try:
        category = handler.handle(CreateCategoryDTO(name=name, description=description))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category.id} '{category.name}' created")


@click.command("list")
@click.option("--active", "active_only", is_flag=True, default=False, help="Only active categories.")
def category_list(active_only: bool) -> None:
    """List categories."""
    categories = ListCategoriesHandler(category_repository()).handle(active_only=active_only)

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<42} {'Name':<24} {'Active':>6}")
    click.echo("-" * 74)
    for c in categories:
        click.echo(f"{c.id:<42} {c.name.value:<24} {'yes' if c.is_active else 'no':>6}")


@click.command("update")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default="", help="New description.")
def category_update(category_id: str, name: str, description: str) -> None:
    """Rename a category and replace its description."""
    handler = UpdateCategoryHandler(
        category_repo=category_repository(),
        domain_service=category_domain_service(),
    )

    try:
        handler.handle(UpdateCategoryDTO(id=category_id, name=name, description=description))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} updated")


def _status_handler() -> ChangeCategoryStatusHandler:
    return ChangeCategoryStatusHandler(
        category_repo=category_repository(),
        domain_service=category_domain_service(),
    )


@click.command("activate")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_activate(category_id: str) -> None:
    """Activate an inactive category."""
    try:
        _status_handler().activate(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} activated")


@click.command("deactivate")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_deactivate(category_id: str) -> None:
    """Deactivate an active category."""
    try:
        _status_handler().deactivate(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} deactivated")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_delete(category_id: str) -> None:
    """Delete a category that has no products."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(),
        domain_service=category_domain_service(),
    )

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} deleted")


@click.command("stats")
def category_stats() -> None:
    """Show how many categories are active and inactive."""
    stats = CategoryStatisticsHandler(category_domain_service()).handle()
    click.echo(f"Total:    {stats.total}")
    click.echo(f"Active:   {stats.active}")
    click.echo(f"Inactive: {stats.inactive}")
