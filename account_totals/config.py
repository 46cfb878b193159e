"""Central configuration for the account totals package."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SOURCE = "accounts.json"


@dataclass(slots=True, frozen=True)
class Settings:
    source: str
    request_timeout: float
    total_label: str
    separator: str
    decimal_places: int


SETTINGS = Settings(
    source=DEFAULT_SOURCE,
    request_timeout=10.0,
    total_label="Account Total",
    separator=" : ",
    decimal_places=2,
)
