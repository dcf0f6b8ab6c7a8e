"""Product reference data.

Products come from an external catalog and are never mutated here.
The crop matcher and the shopping cart both read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from norifarm.domain.model.value_objects import Money


class Retailer(Enum):
    WALMART = "walmart"
    AMAZON = "amazon"
    TARGET = "target"


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    description: str
    brand: str
    category: str
    retailer: Retailer
    price: Money
    rating: float
    review_count: int
    in_stock: bool
    product_url: str = ""
    image_url: str = ""
    original_price: Money | None = None
    related_crop_types: frozenset[str] = field(default_factory=frozenset)

    def relates_to(self, crop_type: str) -> bool:
        return crop_type in self.related_crop_types

    def mentions(self, text: str) -> bool:
        """True if *text* appears in the name or description, ignoring case."""
        needle = text.lower()
        return needle in self.name.lower() or needle in self.description.lower()

    @property
    def is_discounted(self) -> bool:
        return self.original_price is not None and self.price < self.original_price
