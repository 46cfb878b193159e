"""Plain-text rendering of grouped balances and their totals."""
from __future__ import annotations

from typing import Iterable, TextIO

from account_totals.config import SETTINGS
from account_totals.domain.models import GroupedAccounts, Totals


def format_amount(value: float, places: int | None = None) -> str:
    places = SETTINGS.decimal_places if places is None else places
    return format(value, f".{places}f")


def present(grouped: GroupedAccounts, totals: Totals) -> list[str]:
    sep = SETTINGS.separator
    lines = [f"{SETTINGS.total_label}{sep}{format_amount(totals.grand_total)}"]
    for brokerage_name, accounts in grouped.items():
        lines.append(f"{brokerage_name}{sep}{format_amount(totals.subtotal(brokerage_name))}")
        for account, balance in accounts.items():
            lines.append(f"{account}{sep}{format_amount(balance)}")
    return lines


def write_lines(lines: Iterable[str], sink: TextIO) -> None:
    for line in lines:
        sink.write(line + "\n")
