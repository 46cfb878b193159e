"""Application services orchestrating the balance report workflow."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from account_totals.application.dto import BalanceReport
from account_totals.domain.errors import FetchError
from account_totals.domain.models import GroupedAccounts, Totals
from account_totals.domain.repositories import AccountFetcher
from account_totals.domain.services import BalanceAggregator
from account_totals.infrastructure.parsing.records import require_account_array
from account_totals.presentation.text_report import present

logger = logging.getLogger(__name__)

Presenter = Callable[[GroupedAccounts, Totals], Sequence[str]]


@dataclass(slots=True)
class BalanceReportContext:
    fetcher: AccountFetcher
    aggregator: BalanceAggregator
    presenter: Presenter = present


class BalanceReportUseCase:
    def __init__(self, context: BalanceReportContext) -> None:
        self._context = context

    def execute(self, source: str) -> BalanceReport:
        return asyncio.run(self.execute_async(source))

    async def execute_async(self, source: str) -> BalanceReport:
        outcome: dict[str, object] = {}

        def on_fetched(error: FetchError | None, data: object) -> None:
            if "resolved" in outcome:
                raise RuntimeError(f"Fetcher resolved {source} more than once")
            outcome["resolved"] = True
            outcome["error"] = error
            outcome["data"] = data

        await self._context.fetcher.fetch(source, on_fetched)
        if "resolved" not in outcome:
            raise FetchError(source, "fetcher finished without a result")
        error = outcome["error"]
        if error is not None:
            raise error

        records = require_account_array(outcome["data"])
        grouped, totals = self._context.aggregator.summarize(records)
        logger.info("Grouped %d records into %d brokerages", len(records), len(grouped))
        lines = self._context.presenter(grouped, totals)
        return BalanceReport(source=source, grouped=grouped, totals=totals, lines=tuple(lines))
