"""Domain models for pe_ledger — pure dataclasses, no I/O dependency."""

from dataclasses import dataclass

from src.pe_common.enums import DisputeState, EventKind, TransactionKind


@dataclass
class Account:
    client_id: int
    available: int = 0   # units, may go negative while a withdrawal is disputed
    held: int = 0        # units, funds under open dispute
    frozen: bool = False

    @property
    def total(self) -> int:
        return self.available + self.held


@dataclass
class TransactionRecord:
    tx_id: int
    owner_client_id: int
    kind: TransactionKind
    amount: int                      # units, > 0
    dispute_state: DisputeState = DisputeState.CLEAN


@dataclass(frozen=True)
class TransactionEvent:
    """Single parsed input event handed to the processor."""

    kind: EventKind
    client_id: int
    tx_id: int
    amount: int | None = None        # units, only for deposit/withdrawal
