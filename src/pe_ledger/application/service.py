"""Replay service: streams events through the processor and builds the report."""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.pe_common.enums import TxErrorKind
from src.pe_common.errors import InvariantViolationError, TxError
from src.pe_ledger.application.schemas import AccountSummary
from src.pe_ledger.domain.invariants import verify_ledger_invariants
from src.pe_ledger.domain.models import TransactionEvent
from src.pe_ledger.domain.processor import TransactionProcessor
from src.pe_ledger.domain.store import LedgerStore

logger = logging.getLogger(__name__)
rejection_logger = logging.getLogger("pe.rejections")


@dataclass
class Rejection:
    position: int  # 0-based index in the event stream
    event: TransactionEvent
    error: TxError

    @property
    def kind(self) -> TxErrorKind:
        return self.error.kind


@dataclass
class ReplayReport:
    applied: int = 0
    rejections: list[Rejection] = field(default_factory=list)
    violations: list[str] = field(default_factory=list)

    @property
    def rejected(self) -> int:
        return len(self.rejections)

    def rejections_by_kind(self) -> dict[TxErrorKind, int]:
        return dict(Counter(r.kind for r in self.rejections))


def replay(
    events: Iterable[TransactionEvent],
    processor: TransactionProcessor,
    verify_invariants: bool = True,
    strict: bool = False,
) -> ReplayReport:
    """Apply every event in order. Rejections are logged and recorded, never fatal.

    With strict=True an invariant violation after the run raises InvariantViolationError.
    """
    report = ReplayReport()
    for position, event in enumerate(events):
        try:
            processor.apply(event)
        except TxError as exc:
            rejection_logger.warning(
                "[%s] client=%d tx=%d rejected: %s (%s)",
                event.kind.value,
                event.client_id,
                event.tx_id,
                exc.message,
                exc.kind.value,
            )
            report.rejections.append(Rejection(position=position, event=event, error=exc))
            continue
        report.applied += 1

    logger.info("Replay finished: applied=%d rejected=%d", report.applied, report.rejected)

    if verify_invariants:
        report.violations = verify_ledger_invariants(processor.store)
        if report.violations and strict:
            raise InvariantViolationError(report.violations)
    return report


def account_summaries(store: LedgerStore, sort: bool = True) -> list[AccountSummary]:
    """Snapshot every known account. Sorted by client id unless sort=False."""
    accounts = store.accounts()
    if sort:
        accounts.sort(key=lambda a: a.client_id)
    return [AccountSummary.from_account(a) for a in accounts]
