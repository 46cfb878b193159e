"""Fetcher interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Callable, Optional, Protocol

from .errors import FetchError

FetchCallback = Callable[[Optional[FetchError], object], None]


class AccountFetcher(Protocol):
    """Retrieves the raw accounts document and hands it to ``callback`` exactly once.

    On success the callback receives ``(None, data)``; on failure ``(error, None)``.
    """

    async def fetch(self, url: str, callback: FetchCallback) -> None:
        ...
