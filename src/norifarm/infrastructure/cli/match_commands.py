"""CLI command for the crop-to-product matcher."""

from __future__ import annotations

import json

import click

from norifarm.application.match_crop import MatchCropHandler
from norifarm.domain.exceptions import DomainException
from norifarm.infrastructure.bootstrap import crop_repository, product_repository
from norifarm.infrastructure.config import get_settings


@click.command("match")
@click.argument("query")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="Print the raw match payload.")
def match(query: str, as_json: bool) -> None:
    """Find a crop by name or NFT id and recommend a product for it."""
    handler = MatchCropHandler(
        crop_repo=crop_repository(),
        product_repo=product_repository(),
        shop_base_url=get_settings().shop_base_url,
    )

    try:
        result = handler.handle(query)
    except DomainException as exc:
        if as_json:
            click.echo(json.dumps({"error": str(exc)}))
            raise click.exceptions.Exit(1)
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    p = result.matched_product
    d = result.crop_details
    ready = "ready" if d.is_ready else f"{d.maturity_level}% mature"
    click.echo(f"{result.crop}  [{d.type}, {d.rarity}, {ready}]")
    click.echo(f"  Best match: {p.title}  {p.price}  ({p.rating}★)")
    click.echo(f"  {'In stock' if p.in_stock else 'Out of stock'}  {p.buy_link}")
    click.echo(f"  {result.all_matches} matching product(s)")
