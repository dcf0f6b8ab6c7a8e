"""JSON-file-backed implementation of CartRepository.

Each line stores a full product snapshot, so the cart still renders if
the catalog later drops the product.
"""

from __future__ import annotations

import json
from pathlib import Path

from norifarm.domain.exceptions import PersistenceError, ValidationError
from norifarm.domain.model.cart import Cart, CartItem
from norifarm.domain.model.value_objects import Quantity
from norifarm.domain.repository.cart_repository import CartRepository
from norifarm.infrastructure.persistence.json_crop_repository import parse_timestamp
from norifarm.infrastructure.persistence.json_product_repository import (
    product_from_raw,
    product_to_raw,
)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get(self) -> Cart:
        return Cart(items=[self._to_domain(raw) for raw in self._load_raw()])

    def save(self, cart: Cart) -> None:
        records = [self._to_raw(item) for item in cart.items]
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "product": product_to_raw(item.product),
            "quantity": item.quantity.value,
            "added_at": item.added_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartItem:
        try:
            return CartItem(
                product=product_from_raw(raw["product"]),
                quantity=Quantity(raw["quantity"]),
                added_at=parse_timestamp(raw["added_at"]),
            )
        except (KeyError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"Malformed cart line: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
