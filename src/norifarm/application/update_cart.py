"""Application service: Remove / Update / Clear cart use cases."""

from __future__ import annotations

import structlog

from norifarm.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class UpdateCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def remove(self, product_id: str) -> None:
        cart = self._cart_repo.get()
        cart.remove(product_id)
        self._cart_repo.save(cart)
        logger.info("cart_item_removed", product_id=product_id)

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity.  Zero or less removes the line."""
        cart = self._cart_repo.get()
        cart.update_quantity(product_id, quantity)
        self._cart_repo.save(cart)
        logger.info("cart_item_updated", product_id=product_id, quantity=max(quantity, 0))

    def clear(self) -> None:
        cart = self._cart_repo.get()
        cart.clear()
        self._cart_repo.save(cart)
        logger.info("cart_cleared")
