import click

from norifarm.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from norifarm.infrastructure.cli.crop_commands import (
    crop_edit,
    crop_harvest,
    crop_list,
    crop_plant,
    crop_remove,
    crop_show,
)
from norifarm.infrastructure.cli.image_commands import image_upload
from norifarm.infrastructure.cli.match_commands import match
from norifarm.infrastructure.cli.product_commands import (
    product_list,
    product_recommend,
    product_search,
)
from norifarm.infrastructure.config import get_settings
from norifarm.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Nori Farm — grow virtual crops, shop for real ones"""
    configure_logging(get_settings())


@cli.group()
def crop() -> None:
    """Manage crops."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def image() -> None:
    """Manage crop images."""


# Register subcommands
cli.add_command(match)
crop.add_command(crop_edit)
crop.add_command(crop_harvest)
crop.add_command(crop_list)
crop.add_command(crop_plant)
crop.add_command(crop_remove)
crop.add_command(crop_show)
product.add_command(product_list)
product.add_command(product_recommend)
product.add_command(product_search)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
image.add_command(image_upload)
