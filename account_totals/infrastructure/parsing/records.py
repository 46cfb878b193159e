"""Checks the shape of a decoded accounts document."""
from __future__ import annotations

from typing import Any

from account_totals.domain.errors import InvalidPayload


def require_account_array(payload: object) -> list[Any]:
    """Return the payload's entries; each one is validated when it is grouped."""
    if not isinstance(payload, list):
        raise InvalidPayload(f"Expected a JSON array of accounts, got {type(payload).__name__}")
    return payload
