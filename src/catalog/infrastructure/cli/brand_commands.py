"""CLI commands for the Brand aggregate."""

from __future__ import annotations

import click

from catalog.application.add_brand import AddBrandHandler
from catalog.application.delete_brand import DeleteBrandHandler
from catalog.application.dto import BrandChanges
from catalog.application.list_brands import ListBrandsHandler
from catalog.application.show_brand import ShowBrandHandler
from catalog.application.update_brand import UpdateBrandHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import brand_repository


@click.command("add")
@click.option("--name", required=True, help="Brand name.")
@click.option("--slug", default=None, help="URL slug (derived from the name if omitted).")
@click.option("--description", default="", help="Short description.")
@click.option("--logo", default="", help="Logo URL.")
@click.option("--website", default="", help="Website URL (http:// or https://).")
@click.option("--inactive", is_flag=True, default=False, help="Create the brand as inactive.")
def brand_add(name, slug, description, logo, website, inactive) -> None:
    """Add a new brand."""
    handler = AddBrandHandler(brand_repo=brand_repository())

    try:
        dto = handler.handle(
            name=name,
            slug=slug,
            description=description,
            logo=logo,
            website=website,
            is_active=not inactive,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Brand '{dto.name}' added (id={dto.id}, slug={dto.slug})")


@click.command("list")
@click.option("--active/--inactive", "is_active", default=None, help="Filter by active flag.")
@click.option("--search", default=None, help="Case-insensitive name search.")
def brand_list(is_active: bool | None, search: str | None) -> None:
    """List brands sorted by name."""
    brands = ListBrandsHandler(brand_repo=brand_repository()).handle(
        is_active=is_active, search=search
    )

    if not brands:
        click.echo("No brands found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Slug':<20} {'Active':>6}")
    click.echo("-" * 83)
    for b in brands:
        click.echo(f"{b.id:<34} {b.name:<20} {b.slug:<20} {'yes' if b.is_active else 'no':>6}")


@click.command("show")
@click.option("--id", "brand_id", default=None, help="Brand ID.")
@click.option("--slug", default=None, help="Brand slug.")
def brand_show(brand_id: str | None, slug: str | None) -> None:
    """Show a brand by ID or slug."""
    if not brand_id and not slug:
        raise click.ClickException("Either --id or --slug is required")

    try:
        dto = ShowBrandHandler(brand_repo=brand_repository()).handle(
            brand_id=brand_id, slug=slug
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Brand:       {dto.name}  (id={dto.id})")
    click.echo(f"Slug:        {dto.slug}")
    click.echo(f"Active:      {'yes' if dto.is_active else 'no'}")
    if dto.description:
        click.echo(f"Description: {dto.description}")
    if dto.logo:
        click.echo(f"Logo:        {dto.logo}")
    if dto.website:
        click.echo(f"Website:     {dto.website}")


@click.command("update")
@click.option("--id", "brand_id", required=True, help="Brand ID.")
@click.option("--name", default=None)
@click.option("--slug", default=None)
@click.option("--description", default=None)
@click.option("--logo", default=None)
@click.option("--website", default=None)
@click.option("--active/--inactive", "is_active", default=None)
def brand_update(brand_id, name, slug, description, logo, website, is_active) -> None:
    """Update selected fields of a brand."""
    handler = UpdateBrandHandler(brand_repo=brand_repository())
    changes = BrandChanges(
        name=name,
        slug=slug,
        description=description,
        logo=logo,
        website=website,
        is_active=is_active,
    )

    try:
        dto = handler.handle(brand_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Brand '{dto.name}' updated.")


@click.command("delete")
@click.option("--id", "brand_id", required=True, help="Brand ID.")
def brand_delete(brand_id: str) -> None:
    """Deactivate a brand (soft delete)."""
    try:
        DeleteBrandHandler(brand_repo=brand_repository()).handle(brand_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Brand {brand_id} deleted.")
