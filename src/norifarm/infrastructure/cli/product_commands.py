"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from norifarm.application.search_products import (
    RecommendProductsHandler,
    SearchProductsHandler,
)
from norifarm.domain.exceptions import DomainException
from norifarm.domain.model.crop import CropType
from norifarm.domain.model.product import Product
from norifarm.infrastructure.bootstrap import product_repository


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<32} {'Category':<12} {'Price':>12}")
    click.echo("-" * 65)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<32} {p.category:<12} {str(p.price):>12}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _print_products(products)


@click.command("search")
@click.argument("query", default="")
@click.option("--category", default=None, help="Only this category.")
def product_search(query: str, category: str | None) -> None:
    """Search products by name or description."""
    handler = SearchProductsHandler(product_repo=product_repository())
    try:
        products = handler.handle(query, category)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _print_products(products)


@click.command("recommend")
@click.argument("crop_type", type=click.Choice([t.value for t in CropType]))
def product_recommend(crop_type: str) -> None:
    """Recommend products for a crop type."""
    try:
        rec = RecommendProductsHandler(product_repo=product_repository()).handle(crop_type)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(rec.reason)
    for pid, name in zip(rec.product_ids, rec.product_names):
        click.echo(f"  {pid:<6} {name}")
