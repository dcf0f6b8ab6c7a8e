"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from norifarm.application.add_to_cart import AddToCartHandler
from norifarm.application.show_cart import ShowCartHandler
from norifarm.application.update_cart import UpdateCartHandler
from norifarm.domain.exceptions import DomainException
from norifarm.infrastructure.bootstrap import cart_repository, product_repository
from norifarm.infrastructure.config import get_settings


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int)
def cart_add(product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        total = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} in cart: {total}")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        UpdateCartHandler(cart_repo=cart_repository()).remove(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(product_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    try:
        UpdateCartHandler(cart_repo=cart_repository()).set_quantity(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} quantity set to {max(quantity, 0)}")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    try:
        UpdateCartHandler(cart_repo=cart_repository()).clear()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show the cart contents."""
    handler = ShowCartHandler(cart_repo=cart_repository(), currency=get_settings().currency)
    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<32} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*66}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<32} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Items':<32} {dto.total_items:>5} {dto.total_price:>27}")
