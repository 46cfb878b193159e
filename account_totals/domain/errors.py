"""Error taxonomy for the balance report pipeline."""
from __future__ import annotations


class AccountTotalsError(Exception):
    """Base class for every failure surfaced by the pipeline."""


class FetchError(AccountTotalsError):
    """The account payload could not be retrieved."""

    def __init__(self, source: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch {source}: {message}")
        self.source = source
        self.message = message
        self.status_code = status_code


class InvalidPayload(AccountTotalsError):
    """The fetched JSON document is not an array of account objects."""


class InvalidRecord(AccountTotalsError):
    """A single account entry is missing a field or carries a bad balance."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Record {index}: {reason}")
        self.index = index
        self.reason = reason
