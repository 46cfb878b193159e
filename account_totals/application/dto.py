"""Application-level DTOs for the balance report."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from account_totals.domain.models import GroupedAccounts, Totals


@dataclass(slots=True, frozen=True)
class BalanceReport:
    source: str
    grouped: GroupedAccounts
    totals: Totals
    lines: Sequence[str]
