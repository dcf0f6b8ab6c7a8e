"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from norifarm.application.dto import CartDTO, CartLineDTO
from norifarm.domain.model.cart import Cart
from norifarm.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, currency: str = "KRW") -> None:
        self._cart_repo = cart_repo
        self._currency = currency

    def handle(self) -> CartDTO:
        return self._to_dto(self._cart_repo.get())

    def _to_dto(self, cart: Cart) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    product_id=item.product.id,
                    product_name=item.product.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.product.price),
                    line_total=str(item.line_total),
                )
                for item in cart.items
            ],
            total_items=cart.total_items,
            total_price=str(cart.total_price(self._currency)),
        )
