"""Command-line entry point.

Run with: payments-engine transactions.csv > accounts.csv
"""

import argparse
import logging
import sys

from config.settings import settings
from src.pe_common.errors import InvariantViolationError, MalformedRecordError
from src.pe_ledger.application.service import account_summaries, replay
from src.pe_ledger.domain.processor import TransactionProcessor
from src.pe_ledger.domain.store import LedgerStore
from src.pe_ledger.infrastructure.csv_io import read_events, write_summaries

logger = logging.getLogger("pe.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payments-engine",
        description="Replay a CSV transaction log and print final client balances as CSV.",
    )
    parser.add_argument("csv_file_path", help="path to the transactions CSV")
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL.upper(),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"stderr log level (default: {settings.LOG_LEVEL})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.STRICT_INVARIANTS,
        help="exit with status 3 if a ledger invariant is violated",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    processor = TransactionProcessor(LedgerStore())
    try:
        with open(args.csv_file_path, newline="", encoding="utf-8-sig", errors="replace") as f:
            replay(
                read_events(f),
                processor,
                verify_invariants=settings.VERIFY_INVARIANTS or args.strict,
                strict=args.strict,
            )
    except OSError as exc:
        logger.error("cannot read %s: %s", args.csv_file_path, exc)
        return 1
    except MalformedRecordError as exc:
        logger.error("%s: %s", args.csv_file_path, exc.message)
        return 1
    except InvariantViolationError as exc:
        logger.error("ledger invariants violated: %s", exc.message)
        return 3

    write_summaries(account_summaries(processor.store, sort=settings.SORT_OUTPUT), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
