"""Tests for local image storage and the upload use case."""

from datetime import datetime, timezone

import pytest

from norifarm.application.upload_image import UploadImageHandler
from norifarm.domain.exceptions import (
    PayloadTooLargeError,
    UnsupportedMediaError,
    ValidationError,
)
from norifarm.infrastructure.storage.local_image_storage import (
    LocalImageStorage,
    sanitize_filename,
)

STAMP = datetime(2026, 1, 1, tzinfo=timezone.utc)
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _storage(tmp_path, **kwargs):
    return LocalImageStorage(tmp_path / "uploads", clock=lambda: STAMP, **kwargs)


class TestLocalImageStorage:

    def test_stores_and_returns_url(self, tmp_path):
        url = _storage(tmp_path).store(PNG, "image/png", "my corn!.png")
        stamp = int(STAMP.timestamp() * 1000)
        assert url == f"/uploads/crop_{stamp}_my_corn_.png"
        assert (tmp_path / "uploads" / f"crop_{stamp}_my_corn_.png").read_bytes() == PNG

    def test_custom_prefix(self, tmp_path):
        url = _storage(tmp_path, url_prefix="https://cdn.test/img/").store(
            PNG, "image/webp", "a.webp"
        )
        assert url.startswith("https://cdn.test/img/crop_")

    def test_unsupported_type(self, tmp_path):
        with pytest.raises(UnsupportedMediaError, match="Only JPEG, PNG, and WebP"):
            _storage(tmp_path).store(b"GIF89a", "image/gif", "a.gif")

    def test_too_large(self, tmp_path):
        with pytest.raises(PayloadTooLargeError, match="Maximum size is 5MB"):
            _storage(tmp_path).store(b"x" * (5 * 1024 * 1024 + 1), "image/jpeg", "a.jpg")

    def test_exactly_at_limit_accepted(self, tmp_path):
        assert _storage(tmp_path).store(b"x" * (5 * 1024 * 1024), "image/jpeg", "a.jpg")

    def test_empty_upload(self, tmp_path):
        with pytest.raises(ValidationError, match="No file received"):
            _storage(tmp_path).store(b"", "image/png", "a.png")

    def test_sanitize(self):
        assert sanitize_filename("héllo wörld.JPG") == "h_llo_w_rld.JPG"


class TestUploadImageHandler:

    def test_returns_url(self, tmp_path):
        handler = UploadImageHandler(_storage(tmp_path))
        assert handler.handle(PNG, "image/png", "a.png").endswith("_a.png")

    def test_rejection_propagates(self, tmp_path):
        handler = UploadImageHandler(_storage(tmp_path))
        with pytest.raises(UnsupportedMediaError):
            handler.handle(PNG, "text/plain", "a.txt")
