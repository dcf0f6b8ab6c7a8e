"""JSON-file-backed, read-only implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from norifarm.domain.exceptions import PersistenceError
from norifarm.domain.model.product import Product, Retailer
from norifarm.domain.model.value_objects import Money
from norifarm.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        if not self._file_path.exists():
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        return [product_from_raw(item) for item in raw]


# --- Serialization helpers (shared with the cart repository) ------------------


def product_to_raw(p: Product) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "brand": p.brand,
        "category": p.category,
        "retailer": p.retailer.value,
        "price": str(p.price.amount),
        "original_price": str(p.original_price.amount) if p.original_price else None,
        "currency": p.price.currency,
        "rating": p.rating,
        "review_count": p.review_count,
        "in_stock": p.in_stock,
        "product_url": p.product_url,
        "image_url": p.image_url,
        "related_crop_types": sorted(p.related_crop_types),
    }


def product_from_raw(item: dict) -> Product:
    currency = item.get("currency", "KRW")
    try:
        original = item.get("original_price")
        return Product(
            id=str(item["id"]),
            name=item["name"],
            description=item.get("description", ""),
            brand=item.get("brand", ""),
            category=item.get("category", ""),
            retailer=Retailer(item["retailer"]),
            price=Money(Decimal(str(item["price"])), currency),
            original_price=Money(Decimal(str(original)), currency) if original else None,
            rating=float(item.get("rating", 0)),
            review_count=int(item.get("review_count", 0)),
            in_stock=bool(item.get("in_stock", True)),
            product_url=item.get("product_url") or "",
            image_url=item.get("image_url") or "",
            related_crop_types=frozenset(item.get("related_crop_types", [])),
        )
    except (KeyError, ValueError, ArithmeticError) as exc:
        raise PersistenceError(f"Malformed product record {item.get('id')!r}: {exc}") from exc
