"""Brokerage balance grouping and reporting toolkit."""
from account_totals.application.use_cases import BalanceReportContext, BalanceReportUseCase
from account_totals.domain.errors import AccountTotalsError, FetchError, InvalidPayload, InvalidRecord
from account_totals.domain.models import AccountRecord, GroupedAccounts, Totals
from account_totals.domain.services import BalanceAggregator, aggregate, group
from account_totals.presentation.text_report import present

__all__ = [
    "AccountRecord",
    "AccountTotalsError",
    "BalanceAggregator",
    "BalanceReportContext",
    "BalanceReportUseCase",
    "FetchError",
    "GroupedAccounts",
    "InvalidPayload",
    "InvalidRecord",
    "Totals",
    "aggregate",
    "group",
    "present",
]
