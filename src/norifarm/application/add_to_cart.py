"""Application service: Add To Cart use case."""

from __future__ import annotations

import structlog

from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.repository.cart_repository import CartRepository
from norifarm.domain.repository.product_repository import ProductRepository
from norifarm.domain.service.clock import Clock, utcnow

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = utcnow,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: str, quantity: int = 1) -> int:
        """Add a product to the cart and return its new line quantity."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        cart = self._cart_repo.get()
        item = cart.add(product, quantity, now=self._clock())
        self._cart_repo.save(cart)

        logger.info("cart_item_added", product_id=product_id, quantity=item.quantity.value)
        return item.quantity.value
