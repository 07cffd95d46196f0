"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductChanges, ProductQuery, ProductSpec
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    brand_repository,
    product_repository,
    product_type_repository,
)
from catalog.infrastructure.cli.params import read_json

_SPEC_FIELDS = {
    "name", "brand_id", "product_type_id", "category", "price", "variants",
    "gender", "description", "discount_price", "images",
}
_CHANGE_FIELDS = _SPEC_FIELDS | {"is_active"}


def _product_spec(raw: object) -> ProductSpec:
    if not isinstance(raw, dict):
        raise click.BadParameter("Product file must contain a JSON object")
    unknown = set(raw) - _SPEC_FIELDS
    if unknown:
        raise click.BadParameter(f"Unknown product field(s): {', '.join(sorted(unknown))}")
    for required in ("name", "brand_id", "product_type_id", "category", "price", "variants"):
        if required not in raw:
            raise click.BadParameter(f"Missing product field '{required}'")
    fields = dict(raw)
    fields["price"] = str(fields["price"])
    if fields.get("discount_price") is not None:
        fields["discount_price"] = str(fields["discount_price"])
    return ProductSpec(**fields)


def _product_changes(raw: object) -> ProductChanges:
    if not isinstance(raw, dict):
        raise click.BadParameter("Changes file must contain a JSON object")
    unknown = set(raw) - _CHANGE_FIELDS
    if unknown:
        raise click.BadParameter(f"Unknown product field(s): {', '.join(sorted(unknown))}")
    fields = dict(raw)
    for money_field in ("price", "discount_price"):
        if fields.get(money_field) is not None:
            fields[money_field] = str(fields[money_field])
    return ProductChanges(**fields)


def display_product(dto) -> None:
    """Shared formatting for displaying a product with its stock tree."""
    click.echo(f"Product {dto.id}  (version={dto.version})")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Category: {dto.category}  Gender: {dto.gender}")
    price = dto.price if dto.discount_price is None else f"{dto.price} (discount {dto.discount_price})"
    click.echo(f"Price:    {price}")
    click.echo(f"Active:   {'yes' if dto.is_active else 'no'}")
    click.echo()
    click.echo(f"  {'Color':<20} {'Size':>6} {'Stock':>7}")
    click.echo(f"  {'-'*35}")
    for variant in dto.variants:
        for size in variant.sizes:
            click.echo(f"  {variant.color:<20} {str(size.size):>6} {size.stock:>7}")
    click.echo(f"  {'-'*35}")
    click.echo(f"  {'Total stock':<27} {dto.total_stock:>7}")
    click.echo(f"  In stock: {'yes' if dto.in_stock else 'no'}")


@click.command("create")
@click.option("--file", "file_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON product document.")
def product_create(file_path: Path) -> None:
    """Create a product from a JSON document."""
    spec = _product_spec(read_json(file_path))
    handler = CreateProductHandler(
        product_repo=product_repository(),
        brand_repo=brand_repository(),
        product_type_repo=product_type_repository(),
    )

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product created successfully")
    display_product(dto)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product and its color/size stock."""
    try:
        dto = ShowProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(dto)


@click.command("list")
@click.option("--type", "product_type_id", default=None, help="Product type ID.")
@click.option("--brand", "brand_id", default=None, help="Brand ID.")
@click.option("--category", default=None)
@click.option("--gender", type=click.Choice(["men", "women", "unisex", "kids"]), default=None)
@click.option("--min-price", default=None)
@click.option("--max-price", default=None)
@click.option("--in-stock", is_flag=True, default=False, help="Only products with stock.")
@click.option("--search", default=None, help="Text to look for in name or description.")
@click.option("--sort", default="-created_at", show_default=True, help="name, price, created_at or rating; prefix '-' for descending.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--limit", type=click.IntRange(min=1), default=10, show_default=True)
def product_list(product_type_id, brand_id, category, gender, min_price, max_price, in_stock, search, sort, page, limit) -> None:
    """List active products."""
    query = ProductQuery(
        product_type_id=product_type_id,
        category=category,
        gender=gender,
        brand_id=brand_id,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        search=search,
        sort=sort,
        page=page,
        limit=limit,
    )

    try:
        result = ListProductsHandler(product_repo=product_repository()).handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 78)
    for p in result.items:
        click.echo(f"{p.id:<34} {p.name:<24} {p.price:>10} {p.total_stock:>7}")
    click.echo(f"Page {result.page}/{result.pages}  ({result.total} products)")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--file", "file_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON object with the fields to change.")
def product_update(product_id: str, file_path: Path) -> None:
    """Update product fields; replacing variants re-validates the stock tree."""
    changes = _product_changes(read_json(file_path))
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        brand_repo=brand_repository(),
        product_type_repo=product_type_repository(),
    )

    try:
        dto = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product updated successfully")
    display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Deactivate a product (soft delete)."""
    try:
        DeleteProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
