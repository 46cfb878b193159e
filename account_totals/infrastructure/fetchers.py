"""Picks the fetcher matching a source string."""
from __future__ import annotations

from urllib.parse import urlparse

from account_totals.domain.repositories import AccountFetcher
from account_totals.infrastructure.files.json_file_fetcher import JsonFileFetcher
from account_totals.infrastructure.http.json_fetcher import HttpJsonFetcher


def is_http_source(source: str) -> bool:
    return urlparse(source).scheme.lower() in {"http", "https"}


def build_fetcher(source: str, timeout: float | None = None) -> AccountFetcher:
    if is_http_source(source):
        return HttpJsonFetcher(timeout=timeout)
    return JsonFileFetcher()
