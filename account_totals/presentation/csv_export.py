"""Tabular export of account balances."""
from __future__ import annotations

import pandas as pd

from account_totals.config import SETTINGS
from account_totals.domain.models import GroupedAccounts

COLUMNS = ["brokerage", "account", "balance"]


def balances_to_frame(grouped: GroupedAccounts) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"brokerage": brokerage_name, "account": account, "balance": balance}
            for brokerage_name, accounts in grouped.items()
            for account, balance in accounts.items()
        ],
        columns=COLUMNS,
    )


def render_csv(grouped: GroupedAccounts) -> str:
    frame = balances_to_frame(grouped)
    return frame.to_csv(index=False, float_format=f"%.{SETTINGS.decimal_places}f", lineterminator="\n")
