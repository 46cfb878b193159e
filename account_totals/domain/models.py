"""Domain models for the balance report pipeline.

Balances are plain floats so that subtotals and the grand total are summed the
same way a JSON consumer would sum them.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from math import isfinite
from typing import Any

from .errors import InvalidRecord

GroupedAccounts = dict[str, dict[str, float]]

BROKERAGE_FIELD = "brokerageName"
ACCOUNT_FIELD = "account"
BALANCE_FIELD = "balance"
REQUIRED_FIELDS = (BROKERAGE_FIELD, ACCOUNT_FIELD, BALANCE_FIELD)


@dataclass(frozen=True)
class AccountRecord:
    """One balance entry as delivered by the accounts endpoint."""

    brokerage_name: str
    account: str
    balance: float

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], index: int = 0) -> "AccountRecord":
        if not isinstance(raw, Mapping):
            raise InvalidRecord(index, f"expected a JSON object, got {type(raw).__name__}")
        missing = [name for name in REQUIRED_FIELDS if raw.get(name) is None]
        if missing:
            raise InvalidRecord(index, f"missing required fields: {', '.join(missing)}")
        return check_record(
            cls(
                brokerage_name=raw[BROKERAGE_FIELD],
                account=raw[ACCOUNT_FIELD],
                balance=raw[BALANCE_FIELD],
            ),
            index,
        )


def check_record(record: AccountRecord, index: int) -> AccountRecord:
    """Reject non-text identifiers and balances that are not finite numbers."""
    if not isinstance(record.brokerage_name, str):
        raise InvalidRecord(index, f"{BROKERAGE_FIELD} must be text")
    if not isinstance(record.account, str):
        raise InvalidRecord(index, f"{ACCOUNT_FIELD} must be text")
    balance = record.balance
    # bool is an int subclass but never a balance
    if isinstance(balance, bool) or not isinstance(balance, (int, float)):
        raise InvalidRecord(index, f"{BALANCE_FIELD} must be a number, got {balance!r}")
    try:
        balance = float(balance)
    except OverflowError:
        raise InvalidRecord(index, f"{BALANCE_FIELD} is too large to be a finite number") from None
    if not isfinite(balance):
        raise InvalidRecord(index, f"{BALANCE_FIELD} must be finite, got {balance!r}")
    if isinstance(record.balance, int):
        record = AccountRecord(record.brokerage_name, record.account, balance)
    return record


@dataclass(frozen=True)
class Totals:
    """Per-brokerage subtotals with the grand total held apart from them."""

    per_brokerage: dict[str, float] = field(default_factory=dict)
    grand_total: float = 0.0

    def subtotal(self, brokerage_name: str) -> float:
        return self.per_brokerage[brokerage_name]
