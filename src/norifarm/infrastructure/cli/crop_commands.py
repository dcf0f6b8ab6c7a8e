"""CLI commands for the Crop aggregate."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import click

from norifarm.application.dto import EditCropSpec, PlantCropSpec
from norifarm.application.edit_crop import EditCropHandler
from norifarm.application.harvest_crop import HarvestCropHandler
from norifarm.application.plant_crop import PlantCropHandler
from norifarm.application.remove_crop import RemoveCropHandler
from norifarm.application.show_farm import ShowCropHandler, ShowFarmHandler
from norifarm.domain.exceptions import DomainException
from norifarm.domain.model.crop import Crop, CropType, Rarity
from norifarm.infrastructure.bootstrap import crop_repository, random_source
from norifarm.infrastructure.config import get_settings

_TYPES = click.Choice([t.value for t in CropType])
_RARITIES = click.Choice([r.value for r in Rarity])
_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _display_crop(crop: Crop) -> None:
    status = "READY" if crop.is_ready else f"{crop.maturity_level:.0f}%"
    click.echo(f"Crop {crop.id}  ({status})")
    click.echo(f"  Name:      {crop.name}")
    click.echo(f"  Type:      {crop.type.value}")
    click.echo(f"  Rarity:    {crop.rarity.value}")
    click.echo(f"  NFT:       {crop.nft_token_id or 'N/A'}")
    click.echo(f"  Planted:   {crop.planted_at:%Y-%m-%d %H:%M UTC}")
    click.echo(f"  Harvest:   {crop.harvest_at:%Y-%m-%d %H:%M UTC}")
    click.echo(f"  Yield:     {crop.expected_yield} expected", nl=False)
    if crop.actual_yield is not None:
        click.echo(f", {crop.actual_yield:.2f} last harvest")
    else:
        click.echo()


@click.command("list")
def crop_list() -> None:
    """List every crop on the farm."""
    try:
        overview = ShowFarmHandler(crop_repo=crop_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not overview.crops:
        click.echo("No crops planted yet.")
        return

    click.echo(f"{'ID':<24} {'Name':<20} {'Type':<10} {'Maturity':>9} {'NFT':>8}")
    click.echo("-" * 75)
    for c in overview.crops:
        maturity = "READY" if c.is_ready else f"{c.maturity_level:.0f}%"
        click.echo(
            f"{c.id:<24} {c.name:<20} {c.type.value:<10} {maturity:>9} {c.nft_token_id or '-':>8}"
        )
    click.echo("-" * 75)
    click.echo(
        f"Total: {len(overview.crops)}  Ready: {len(overview.ready)}  "
        f"Growing: {len(overview.growing)}"
    )


@click.command("show")
@click.option("--id", "crop_id", required=True, help="Crop ID to display.")
def crop_show(crop_id: str) -> None:
    """Show details of one crop."""
    try:
        crop = ShowCropHandler(crop_repo=crop_repository()).handle(crop_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_crop(crop)


@click.command("plant")
@click.option("--name", required=True, help="Crop name.")
@click.option("--type", "crop_type", required=True, type=_TYPES, help="Crop type.")
@click.option("--description", required=True, help="Short description.")
@click.option("--rarity", default="common", show_default=True, type=_RARITIES)
@click.option("--yield", "expected_yield", default=5.0, show_default=True, type=float,
              help="Expected yield (1-100).")
@click.option("--days", "growth_duration", default=None, type=int,
              help="Days until harvest (defaults per crop type).")
@click.option("--image-url", default=None, help="Image URL.")
def crop_plant(
    name: str,
    crop_type: str,
    description: str,
    rarity: str,
    expected_yield: float,
    growth_duration: int | None,
    image_url: str | None,
) -> None:
    """Plant a new crop."""
    handler = PlantCropHandler(crop_repo=crop_repository(), random_source=random_source())
    spec = PlantCropSpec(
        name=name,
        type=crop_type,
        description=description,
        rarity=rarity,
        expected_yield=expected_yield,
        growth_duration=growth_duration,
        image_url=image_url,
    )

    try:
        crop = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Planted {crop.name} ({crop.nft_token_id}). "
        f"Ready to harvest in {crop.growth_days} days."
    )
    click.echo(f"Crop ID: {crop.id}")


@click.command("harvest")
@click.option("--id", "crop_id", required=True, help="Crop ID to harvest.")
def crop_harvest(crop_id: str) -> None:
    """Harvest a ready crop (starts a new growth cycle)."""
    handler = HarvestCropHandler(crop_repo=crop_repository(), random_source=random_source())

    try:
        event = handler.handle(crop_id, user_id=get_settings().default_user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Harvested {event.yield_amount:.2f} units "
        f"(quality {event.quality_score:.1f}/100)."
    )


@click.command("edit")
@click.option("--id", "crop_id", required=True, help="Crop ID to edit.")
@click.option("--name", default=None)
@click.option("--type", "crop_type", default=None, type=_TYPES)
@click.option("--description", default=None)
@click.option("--rarity", default=None, type=_RARITIES)
@click.option("--yield", "expected_yield", default=None, type=float)
@click.option("--image-url", default=None)
@click.option("--planted-at", default=None, type=_DATE)
@click.option("--harvest-at", default=None, type=_DATE)
@click.option("--days", "growth_duration", default=None, type=int,
              help="Set harvest date this many days after planting.")
@click.option("--nft", "nft_token_id", default=None, help="NFT token id.")
def crop_edit(crop_id: str, growth_duration: int | None, **changes) -> None:
    """Edit a crop.  Options left out keep their current value."""
    repo = crop_repository()

    try:
        current = ShowCropHandler(crop_repo=repo).handle(crop_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    changes["planted_at"] = _as_utc(changes["planted_at"])
    changes["harvest_at"] = _as_utc(changes["harvest_at"])
    changes["type"] = changes.pop("crop_type")
    spec = dataclasses.replace(
        EditCropSpec.from_crop(current),
        **{k: v for k, v in changes.items() if v is not None},
    )
    if growth_duration is not None:
        spec = dataclasses.replace(
            spec, harvest_at=spec.planted_at + timedelta(days=growth_duration)
        )

    handler = EditCropHandler(crop_repo=repo, random_source=random_source())
    try:
        crop = handler.handle(crop_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_crop(crop)


@click.command("remove")
@click.option("--id", "crop_id", required=True, help="Crop ID to remove.")
def crop_remove(crop_id: str) -> None:
    """Remove a crop from the farm."""
    try:
        RemoveCropHandler(crop_repo=crop_repository()).handle(crop_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Crop {crop_id} removed.")
