"""Abstract repository for Crop aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from norifarm.domain.model.crop import Crop


class CropRepository(ABC):

    @abstractmethod
    def get_by_id(self, crop_id: str) -> Crop | None:
        """Return a crop by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Crop]:
        """Return every crop in collection order."""

    @abstractmethod
    def save(self, crop: Crop) -> None:
        """Persist a new or updated crop (upsert by ID).

        Raises PersistenceError if the store cannot be written.
        """

    @abstractmethod
    def delete(self, crop_id: str) -> None:
        """Remove a crop by ID.  Deleting a missing crop is a no-op."""
