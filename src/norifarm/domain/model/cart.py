"""Cart aggregate — products the user intends to buy.

A cart holds at most one line per product; adding the same product
again grows the existing line instead of creating a second one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.model.product import Product
from norifarm.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    product: Product
    quantity: Quantity
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart."""

    items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int = 1, now: datetime | None = None) -> CartItem:
        """Add *quantity* of *product*, merging with an existing line."""
        qty = Quantity(quantity)
        for item in self.items:
            if item.product.id == product.id:
                item.quantity = item.quantity + qty
                return item
        item = CartItem(
            product=product,
            quantity=qty,
            added_at=now or datetime.now(timezone.utc),
        )
        self.items.append(item)
        return item

    def remove(self, product_id: str) -> None:
        self._find_item(product_id)
        self.items = [i for i in self.items if i.product.id != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less drops the line."""
        if quantity <= 0:
            self.remove(product_id)
            return
        self._find_item(product_id).quantity = Quantity(quantity)

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    @property
    def total_items(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def total_price(self, currency: str = "KRW") -> Money:
        """Sum of line totals in the lines' own currency.

        *currency* only labels the zero total of an empty cart.
        """
        if not self.items:
            return Money.zero(currency)
        result = self.items[0].line_total
        for item in self.items[1:]:
            result = result + item.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: str) -> CartItem:
        for item in self.items:
            if item.product.id == product_id:
                return item
        raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
