"""Command-line entrypoint for the brokerage balance report."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from account_totals import config
from account_totals.application.use_cases import BalanceReportContext, BalanceReportUseCase
from account_totals.domain.errors import FetchError, InvalidPayload, InvalidRecord
from account_totals.domain.services import BalanceAggregator
from account_totals.infrastructure.fetchers import build_fetcher
from account_totals.presentation.csv_export import render_csv
from account_totals.presentation.text_report import write_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FETCH_ERROR = 1
EXIT_INVALID_DATA = 3


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize brokerage account balances from a JSON source")
    parser.add_argument(
        "source",
        nargs="?",
        default=config.SETTINGS.source,
        help="URL (http/https) or path of the accounts JSON document",
    )
    parser.add_argument("--timeout", type=float, help="HTTP request timeout in seconds")
    parser.add_argument("--format", choices=("text", "csv"), default="text", help="Output format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    settings = config.SETTINGS
    if args.timeout is not None:
        settings = replace(settings, request_timeout=args.timeout)

    context = BalanceReportContext(
        fetcher=build_fetcher(args.source, timeout=settings.request_timeout),
        aggregator=BalanceAggregator(),
    )
    use_case = BalanceReportUseCase(context)
    try:
        report = use_case.execute(args.source)
    except FetchError as exc:
        logger.debug("Fetch failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FETCH_ERROR
    except (InvalidPayload, InvalidRecord) as exc:
        logger.debug("Rejected account data from %s", args.source, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_DATA

    if args.format == "csv":
        sys.stdout.write(render_csv(report.grouped))
    else:
        write_lines(report.lines, sys.stdout)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
