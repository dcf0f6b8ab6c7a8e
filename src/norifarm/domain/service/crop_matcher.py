"""Domain service: Crop-Product Matcher.

Resolves a free-text query to one crop, then picks one product to
recommend for it.  Pure function over snapshots of the crop and product
collections; it reads no repositories and keeps no state.

Product selection is layered:
  Tier 1 — products related to the crop type, or whose name/description
           mentions the crop name.  ``all_matches`` is the full tier-1 count.
  Tier 2 — only if tier 1 is empty: the first product related by type.
           ``all_matches`` is then 1, whatever the size of that set.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Sequence

from norifarm.domain.exceptions import (
    CropNotFoundError,
    NoProductMatchError,
    ValidationError,
)
from norifarm.domain.model.crop import Crop
from norifarm.domain.model.product import Product

DEFAULT_SHOP_BASE_URL = "https://norifarm-shop.com"


@dataclass(frozen=True)
class MatchedProduct:
    title: str
    price: str
    image: str
    buy_link: str
    description: str
    rating: float
    in_stock: bool


@dataclass(frozen=True)
class CropDetails:
    id: str
    type: str
    maturity_level: int
    is_ready: bool
    rarity: str


@dataclass(frozen=True)
class MatchResult:
    crop: str
    matched_product: MatchedProduct
    crop_details: CropDetails
    all_matches: int

    def to_dict(self) -> dict[str, Any]:
        """The wire shape served to web clients."""
        p = self.matched_product
        d = self.crop_details
        return {
            "crop": self.crop,
            "matchedProduct": {
                "title": p.title,
                "price": p.price,
                "image": p.image,
                "buyLink": p.buy_link,
                "description": p.description,
                "rating": p.rating,
                "inStock": p.in_stock,
            },
            "cropDetails": {
                "id": d.id,
                "type": d.type,
                "maturityLevel": d.maturity_level,
                "isReady": d.is_ready,
                "rarity": d.rarity,
            },
            "allMatches": self.all_matches,
        }


def find_crop(query: str, crops: Sequence[Crop]) -> Crop:
    """First crop whose name contains the query, whose token equals it,
    or whose name is contained in it.  Case-insensitive."""
    needle = query.lower()
    for crop in crops:
        name = crop.name.lower()
        token = (crop.nft_token_id or "").lower()
        if needle in name or (token and token == needle) or name in needle:
            return crop
    raise CropNotFoundError(f"No crop found for query: {query}")


def select_products(crop: Crop, products: Sequence[Product]) -> list[Product]:
    """Tier-1 candidates, or the single tier-2 fallback, in catalog order."""
    crop_type = crop.type.value
    matches = [
        p for p in products
        if p.relates_to(crop_type) or p.mentions(crop.name)
    ]
    if matches:
        return matches

    for p in products:
        if p.relates_to(crop_type):
            return [p]
    return []


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def crop_label(crop: Crop) -> str:
    if crop.nft_token_id:
        return f"{crop.name} #{crop.nft_token_id.removeprefix('NFT')}"
    return crop.name


def match_crop_to_product(
    query: str,
    crops: Sequence[Crop],
    products: Sequence[Product],
    now: datetime,
    shop_base_url: str = DEFAULT_SHOP_BASE_URL,
) -> MatchResult:
    if not query or not query.strip():
        raise ValidationError("Query parameter is required", {"query": "required"})

    crop = find_crop(query, crops).copy().refresh(now)

    matches = select_products(crop, products)
    if not matches:
        raise NoProductMatchError(
            f"No matching products found for crop: {crop.name}"
        )
    best = matches[0]

    return MatchResult(
        crop=crop_label(crop),
        matched_product=MatchedProduct(
            title=best.name,
            price=best.price.format_localized(),
            image=best.image_url,
            buy_link=best.product_url or f"{shop_base_url.rstrip('/')}/product/{best.id}",
            description=best.description,
            rating=best.rating,
            in_stock=best.in_stock,
        ),
        crop_details=CropDetails(
            id=crop.id,
            type=crop.type.value,
            maturity_level=_round_half_up(crop.maturity_level),
            is_ready=crop.is_ready,
            rarity=crop.rarity.value,
        ),
        all_matches=len(matches),
    )
