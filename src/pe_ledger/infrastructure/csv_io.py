"""CSV adapter: parses event rows into TransactionEvents and writes the account report.

Header and cell whitespace is trimmed. Rows may omit the trailing amount
column (dispute/resolve/chargeback). Rows that fail to parse are logged and
skipped; they never reach the processor.
"""

import csv
import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from pydantic import ValidationError

from src.pe_common.errors import MalformedRecordError
from src.pe_ledger.application.schemas import CSV_HEADER, AccountSummary, TransactionRow
from src.pe_ledger.domain.models import TransactionEvent

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "client", "tx")


def parse_row(header: list[str], cells: list[str]) -> TransactionEvent:
    """Map one row onto the header. Raises MalformedRecordError."""
    if len(cells) > len(header):
        raise MalformedRecordError(f"expected at most {len(header)} fields, got {len(cells)}")
    values = {name: cell.strip() for name, cell in zip(header, cells)}
    try:
        return TransactionRow.model_validate(values).to_event()
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise MalformedRecordError(details) from exc


def read_events(stream: TextIO) -> Iterator[TransactionEvent]:
    """Yield events in file order, skipping blank and malformed rows."""
    reader = csv.reader(stream)
    try:
        raw_header = next(reader, None)
    except csv.Error as exc:
        raise MalformedRecordError(f"unreadable header: {exc}") from exc
    if raw_header is None:
        return
    # a UTF-8 byte order mark survives decoding unless the stream used utf-8-sig
    header = [name.strip().lstrip("\ufeff").strip().lower() for name in raw_header]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise MalformedRecordError(f"header is missing columns: {', '.join(missing)}")

    while True:
        try:
            cells = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            logger.warning("line %d skipped: %s", reader.line_num, exc)
            continue
        if not any(cell.strip() for cell in cells):
            continue
        try:
            event = parse_row(header, cells)
        except MalformedRecordError as exc:
            logger.warning("line %d skipped: %s row=%r", reader.line_num, exc.message, cells)
            continue
        yield event


def write_summaries(summaries: Iterable[AccountSummary], stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for summary in summaries:
        writer.writerow(summary.to_csv_row())
