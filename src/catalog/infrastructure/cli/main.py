import click

from catalog.domain.exceptions import ConfigurationError
from catalog.infrastructure.bootstrap import config
from catalog.infrastructure.cli.brand_commands import (
    brand_add,
    brand_delete,
    brand_list,
    brand_show,
    brand_update,
)
from catalog.infrastructure.cli.image_commands import image_upload
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.product_type_commands import (
    product_type_add,
    product_type_delete,
    product_type_list,
    product_type_show,
    product_type_update,
)
from catalog.infrastructure.cli.stock_commands import (
    stock_bulk,
    stock_by_size,
    stock_update,
)
from catalog.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Catalog: products, brands, product types and color/size stock"""
    try:
        configure_logging(config())
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))


@cli.group()
def brand() -> None:
    """Manage brands."""


@cli.group("product-type")
def product_type() -> None:
    """Manage product types."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage color/size stock."""


@cli.group()
def image() -> None:
    """Upload images."""


# Register subcommands
brand.add_command(brand_add)
brand.add_command(brand_delete)
brand.add_command(brand_list)
brand.add_command(brand_show)
brand.add_command(brand_update)
product_type.add_command(product_type_add)
product_type.add_command(product_type_delete)
product_type.add_command(product_type_list)
product_type.add_command(product_type_show)
product_type.add_command(product_type_update)
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_bulk)
stock.add_command(stock_by_size)
stock.add_command(stock_update)
image.add_command(image_upload)
