"""Wall-clock access for the domain.

Handlers take a ``Clock`` so tests can freeze or advance time.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
