"""CLI commands for the ProductType aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product_type import AddProductTypeHandler
from catalog.application.delete_product_type import DeleteProductTypeHandler
from catalog.application.dto import ProductTypeChanges
from catalog.application.list_product_types import ListProductTypesHandler
from catalog.application.show_product_type import ShowProductTypeHandler
from catalog.application.update_product_type import UpdateProductTypeHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_type_repository


@click.command("add")
@click.option("--name", required=True, help="Product type name (e.g. Shoes).")
@click.option("--slug", default=None, help="URL slug (derived from the name if omitted).")
@click.option("--description", default="")
@click.option("--inactive", is_flag=True, default=False)
def product_type_add(name, slug, description, inactive) -> None:
    """Add a new product type."""
    handler = AddProductTypeHandler(product_type_repo=product_type_repository())

    try:
        dto = handler.handle(
            name=name, slug=slug, description=description, is_active=not inactive
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product type '{dto.name}' added (id={dto.id}, slug={dto.slug})")


@click.command("list")
@click.option("--active/--inactive", "is_active", default=None)
@click.option("--search", default=None)
def product_type_list(is_active: bool | None, search: str | None) -> None:
    """List product types sorted by name."""
    types = ListProductTypesHandler(product_type_repo=product_type_repository()).handle(
        is_active=is_active, search=search
    )

    if not types:
        click.echo("No product types found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Slug':<20} {'Active':>6}")
    click.echo("-" * 83)
    for t in types:
        click.echo(f"{t.id:<34} {t.name:<20} {t.slug:<20} {'yes' if t.is_active else 'no':>6}")


@click.command("show")
@click.option("--id", "product_type_id", default=None)
@click.option("--slug", default=None)
def product_type_show(product_type_id: str | None, slug: str | None) -> None:
    """Show a product type by ID or slug."""
    if not product_type_id and not slug:
        raise click.ClickException("Either --id or --slug is required")

    try:
        dto = ShowProductTypeHandler(product_type_repo=product_type_repository()).handle(
            product_type_id=product_type_id, slug=slug
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product type: {dto.name}  (id={dto.id})")
    click.echo(f"Slug:         {dto.slug}")
    click.echo(f"Active:       {'yes' if dto.is_active else 'no'}")
    if dto.description:
        click.echo(f"Description:  {dto.description}")


@click.command("update")
@click.option("--id", "product_type_id", required=True)
@click.option("--name", default=None)
@click.option("--slug", default=None)
@click.option("--description", default=None)
@click.option("--active/--inactive", "is_active", default=None)
def product_type_update(product_type_id, name, slug, description, is_active) -> None:
    """Update selected fields of a product type."""
    handler = UpdateProductTypeHandler(product_type_repo=product_type_repository())
    changes = ProductTypeChanges(
        name=name, slug=slug, description=description, is_active=is_active
    )

    try:
        dto = handler.handle(product_type_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product type '{dto.name}' updated.")


@click.command("delete")
@click.option("--id", "product_type_id", required=True)
def product_type_delete(product_type_id: str) -> None:
    """Deactivate a product type (soft delete)."""
    try:
        DeleteProductTypeHandler(product_type_repo=product_type_repository()).handle(
            product_type_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product type {product_type_id} deleted.")
