"""Application service: product search and crop-type recommendations."""

from __future__ import annotations

from norifarm.application.dto import RecommendationDTO
from norifarm.domain.model.product import Product
from norifarm.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: str = "", category: str | None = None) -> list[Product]:
        """Products mentioning *query*, optionally limited to one category."""
        products = self._product_repo.list_all()
        if query:
            products = [p for p in products if p.mentions(query)]
        if category:
            products = [p for p in products if p.category.lower() == category.lower()]
        return products


class RecommendProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, crop_type: str) -> RecommendationDTO:
        related = [p for p in self._product_repo.list_all() if p.relates_to(crop_type)]
        return RecommendationDTO(
            crop_type=crop_type,
            product_ids=[p.id for p in related],
            product_names=[p.name for p in related],
            reason=f"Perfect for your {crop_type} growing journey",
        )
