"""Abstract storage for uploaded crop images."""

from __future__ import annotations

from abc import ABC, abstractmethod

ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp"})
MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ImageStorage(ABC):

    @abstractmethod
    def store(self, data: bytes, content_type: str, original_name: str) -> str:
        """Save an image and return the URL it is served from.

        Raises UnsupportedMediaError for content types outside
        ``ALLOWED_IMAGE_TYPES`` and PayloadTooLargeError above the size
        limit.
        """
