"""Filesystem-backed implementation of ImageStorage.

Files land in ``uploads_dir`` as ``crop_<epoch ms>_<sanitized name>`` and
are served from ``url_prefix``.
"""

from __future__ import annotations

import re
from pathlib import Path

from norifarm.domain.exceptions import (
    PayloadTooLargeError,
    PersistenceError,
    UnsupportedMediaError,
    ValidationError,
)
from norifarm.domain.repository.image_storage import (
    ALLOWED_IMAGE_TYPES,
    MAX_IMAGE_BYTES,
    ImageStorage,
)
from norifarm.domain.service.clock import Clock, utcnow

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_filename(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


class LocalImageStorage(ImageStorage):

    def __init__(
        self,
        uploads_dir: Path,
        url_prefix: str = "/uploads",
        max_bytes: int = MAX_IMAGE_BYTES,
        clock: Clock = utcnow,
    ) -> None:
        self._uploads_dir = uploads_dir
        self._url_prefix = url_prefix.rstrip("/")
        self._max_bytes = max_bytes
        self._clock = clock

    def store(self, data: bytes, content_type: str, original_name: str) -> str:
        if not data:
            raise ValidationError("No file received", {"image": "empty upload"})
        if content_type.lower() not in ALLOWED_IMAGE_TYPES:
            raise UnsupportedMediaError(
                "Invalid file type. Only JPEG, PNG, and WebP are allowed",
                {"image": content_type},
            )
        if len(data) > self._max_bytes:
            raise PayloadTooLargeError(
                f"File too large. Maximum size is {self._max_bytes // (1024 * 1024)}MB",
                {"image": f"{len(data)} bytes"},
            )

        filename = self._filename_for(original_name)
        try:
            self._uploads_dir.mkdir(parents=True, exist_ok=True)
            (self._uploads_dir / filename).write_bytes(data)
        except OSError as exc:
            raise PersistenceError(f"Cannot store image {filename}: {exc}") from exc
        return f"{self._url_prefix}/{filename}"

    def _filename_for(self, original_name: str) -> str:
        stamp = int(self._clock().timestamp() * 1000)
        return f"crop_{stamp}_{sanitize_filename(Path(original_name).name or 'upload')}"
