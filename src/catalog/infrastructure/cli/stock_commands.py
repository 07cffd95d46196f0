"""CLI commands for color/size stock."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.bulk_update_stock import BulkUpdateStockHandler
from catalog.application.show_stock_by_size import ShowStockBySizeHandler
from catalog.application.update_stock import UpdateStockHandler
from catalog.domain.exceptions import BulkStockUpdateError, DomainException
from catalog.infrastructure.bootstrap import config, product_repository
from catalog.infrastructure.cli.params import SIZE, read_json
from catalog.infrastructure.cli.product_commands import display_product


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--color", required=True, help="Color (exact, case-sensitive).")
@click.option("--size", required=True, type=SIZE, help="Size: a number (8) or a label (M).")
@click.option("--quantity", required=True, type=int, help="Signed change: +5 restocks, -2 consumes.")
def stock_update(product_id: str, color: str, size, quantity: int) -> None:
    """Apply a stock change to one color/size."""
    handler = UpdateStockHandler(
        product_repo=product_repository(),
        max_attempts=config().stock_update_retries,
    )

    try:
        dto = handler.handle(product_id, color=color, size=size, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f'Stock updated successfully for color "{color}" size {size}')
    display_product(dto)


@click.command("bulk")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--file", "file_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help='JSON: {"variants": [{"color": ..., "sizes": [{"size": ..., "quantity": ...}]}]}')
def stock_bulk(product_id: str, file_path: Path) -> None:
    """Apply many color/size stock changes, best effort."""
    raw = read_json(file_path)
    variants = raw.get("variants") if isinstance(raw, dict) else raw

    handler = BulkUpdateStockHandler(
        product_repo=product_repository(),
        max_attempts=config().stock_update_retries,
    )

    try:
        result = handler.handle(product_id, variants)
    except BulkStockUpdateError as exc:
        for error in exc.errors:
            click.echo(f"  ! {error}", err=True)
        raise click.ClickException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock updated for {len(result.updates)} color-size combination(s)")
    for update in result.updates:
        click.echo(f"  {update}")
    for error in result.errors:
        click.echo(f"  ! {error}", err=True)
    display_product(result.product)


@click.command("by-size")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--size", required=True, type=SIZE, help="Size: a number (8) or a label (M).")
def stock_by_size(product_id: str, size) -> None:
    """Show total stock of one size across all colors."""
    try:
        total = ShowStockBySizeHandler(product_repo=product_repository()).handle(product_id, size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Size {size}: {total} in stock across all colors")
