"""Domain services grouping balances and rolling them up into totals."""
from __future__ import annotations

from typing import Iterable, Mapping, Union

from .models import AccountRecord, GroupedAccounts, Totals, check_record

RecordLike = Union[AccountRecord, Mapping[str, object]]


def group(records: Iterable[RecordLike]) -> GroupedAccounts:
    """Nest balances by brokerage, then by account.

    Brokerages and accounts keep first-seen order. A repeated
    (brokerage, account) pair keeps the balance of its last occurrence.
    """
    grouped: GroupedAccounts = {}
    for index, item in enumerate(records):
        if isinstance(item, AccountRecord):
            record = check_record(item, index)
        else:
            record = AccountRecord.from_mapping(item, index=index)
        grouped.setdefault(record.brokerage_name, {})[record.account] = record.balance
    return grouped


def aggregate(grouped: GroupedAccounts) -> Totals:
    """Sum each brokerage, then sum the subtotals into the grand total."""
    per_brokerage: dict[str, float] = {}
    for brokerage_name, accounts in grouped.items():
        subtotal = 0.0
        for balance in accounts.values():
            subtotal += balance
        per_brokerage[brokerage_name] = subtotal

    # Summed from the subtotals, not the raw balances; float addition is not associative.
    grand_total = 0.0
    for subtotal in per_brokerage.values():
        grand_total += subtotal
    return Totals(per_brokerage=per_brokerage, grand_total=grand_total)


class BalanceAggregator:
    """Runs grouping and aggregation as one step of the report workflow."""

    def group(self, records: Iterable[RecordLike]) -> GroupedAccounts:
        return group(records)

    def aggregate(self, grouped: GroupedAccounts) -> Totals:
        return aggregate(grouped)

    def summarize(self, records: Iterable[RecordLike]) -> tuple[GroupedAccounts, Totals]:
        grouped = self.group(records)
        return grouped, self.aggregate(grouped)
