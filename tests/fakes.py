"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON
ones but keep everything in a dict. No file I/O, no side effects.
Crops are copied on the way in and out, like a real store would.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from norifarm.domain.exceptions import PersistenceError
from norifarm.domain.model.cart import Cart
from norifarm.domain.model.crop import Crop, CropType, Rarity
from norifarm.domain.model.product import Product, Retailer
from norifarm.domain.model.value_objects import Money
from norifarm.domain.repository.cart_repository import CartRepository
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.repository.product_repository import ProductRepository
from norifarm.domain.service.random_source import RandomSource

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeCropRepository(CropRepository):

    def __init__(self, crops: list[Crop] | None = None) -> None:
        self._store: dict[str, Crop] = {}
        for c in crops or []:
            self._store[c.id] = c.copy()

    def get_by_id(self, crop_id: str) -> Crop | None:
        crop = self._store.get(crop_id)
        return crop.copy() if crop else None

    def list_all(self) -> list[Crop]:
        return [c.copy() for c in self._store.values()]

    def save(self, crop: Crop) -> None:
        self._store[crop.id] = crop.copy()

    def delete(self, crop_id: str) -> None:
        self._store.pop(crop_id, None)


class FailingCropRepository(FakeCropRepository):
    """Reads work; every write fails."""

    def save(self, crop: Crop) -> None:
        raise PersistenceError("disk full")

    def delete(self, crop_id: str) -> None:
        raise PersistenceError("disk full")


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._cart = Cart()

    def get(self) -> Cart:
        return Cart(items=list(self._cart.items))

    def save(self, cart: Cart) -> None:
        self._cart = Cart(items=list(cart.items))


class FixedRandomSource(RandomSource):
    """Returns scripted values; ids count up from 1."""

    def __init__(self, uniform_value: float | None = None, int_value: int = 7) -> None:
        self._uniform_value = uniform_value
        self._int_value = int_value
        self._counter = 0

    def uniform(self, low: float, high: float) -> float:
        if self._uniform_value is None:
            return (low + high) / 2
        return self._uniform_value

    def randint(self, low: int, high: int) -> int:
        return self._int_value

    def new_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}_{self._counter}"


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


# --- Builders -----------------------------------------------------------------


def make_crop(
    id: str = "c1",
    name: str = "Golden Corn",
    type: CropType = CropType.GRAIN,
    days: int = 10,
    planted_at: datetime = T0,
    nft_token_id: str | None = "NFT001",
    rarity: Rarity = Rarity.COMMON,
    expected_yield: float = 10,
) -> Crop:
    return Crop(
        id=id,
        name=name,
        type=type,
        planted_at=planted_at,
        harvest_at=planted_at + timedelta(days=days),
        image_url="/img.png",
        description=f"{name} crop",
        expected_yield=expected_yield,
        rarity=rarity,
        nft_token_id=nft_token_id,
    )


def make_product(
    id: str = "p1",
    name: str = "Thing",
    description: str = "A thing",
    related: tuple[str, ...] = (),
    price: str = "12900",
    product_url: str = "",
    category: str = "produce",
) -> Product:
    return Product(
        id=id,
        name=name,
        description=description,
        brand="Brand",
        category=category,
        retailer=Retailer.AMAZON,
        price=Money.of(price),
        rating=4.5,
        review_count=10,
        in_stock=True,
        product_url=product_url,
        image_url=f"/images/{id}.jpg",
        related_crop_types=frozenset(related),
    )
