"""TransactionProcessor: validates one event at a time and applies it to the LedgerStore.

Every check runs before any mutation, so a raised TxError leaves the store
exactly as it was.

Dispute lifecycle per record:
    CLEAN    --dispute-->    DISPUTED
    DISPUTED --resolve-->    RESOLVED
    RESOLVED --dispute-->    DISPUTED
    DISPUTED --chargeback--> CHARGED_BACK (terminal)
"""

import logging
from collections.abc import Callable

from src.pe_common.enums import DisputeState, EventKind, TransactionKind
from src.pe_common.errors import (
    AccountFrozenError,
    DuplicateTxError,
    InsufficientFundsError,
    InternalError,
    InvalidAmountError,
    InvalidDisputeStateError,
    UnknownTxError,
    WrongOwnerError,
)
from src.pe_ledger.domain.models import Account, TransactionEvent, TransactionRecord
from src.pe_ledger.domain.store import LedgerStore

logger = logging.getLogger(__name__)

# event kind -> (states that accept it, state after it)
DISPUTE_TRANSITIONS: dict[EventKind, tuple[frozenset[DisputeState], DisputeState]] = {
    EventKind.DISPUTE: (
        frozenset({DisputeState.CLEAN, DisputeState.RESOLVED}),
        DisputeState.DISPUTED,
    ),
    EventKind.RESOLVE: (frozenset({DisputeState.DISPUTED}), DisputeState.RESOLVED),
    EventKind.CHARGEBACK: (frozenset({DisputeState.DISPUTED}), DisputeState.CHARGED_BACK),
}


class TransactionProcessor:
    def __init__(self, store: LedgerStore) -> None:
        self.store = store
        self._handlers: dict[EventKind, Callable[[TransactionEvent], None]] = {
            EventKind.DEPOSIT: self._deposit,
            EventKind.WITHDRAWAL: self._withdrawal,
            EventKind.DISPUTE: self._dispute,
            EventKind.RESOLVE: self._resolve,
            EventKind.CHARGEBACK: self._chargeback,
        }
    def apply(self, event: TransactionEvent) -> None:
        """Apply a single event. Raises a TxError subclass if it is rejected."""
        self._handlers[event.kind](event)

    # ------------------------------------------------------------------
    # Deposit / Withdrawal
    # ------------------------------------------------------------------

    def _check_movement(self, event: TransactionEvent) -> tuple[int, Account | None]:
        amount = event.amount
        if amount is None or amount <= 0:
            raise InvalidAmountError(event.tx_id, event.client_id, amount)
        account = self.store.get_account(event.client_id)
        if account is not None and account.frozen:
            raise AccountFrozenError(event.tx_id, event.client_id)
        return amount, account

    def _deposit(self, event: TransactionEvent) -> None:
        amount, _ = self._check_movement(event)
        if self.store.has_record(event.tx_id):
            raise DuplicateTxError(event.tx_id, event.client_id)

        self.store.insert_record(
            TransactionRecord(
                tx_id=event.tx_id,
                owner_client_id=event.client_id,
                kind=TransactionKind.DEPOSIT,
                amount=amount,
            )
        )
        account = self.store.get_or_create_account(event.client_id)
        account.available += amount

    def _withdrawal(self, event: TransactionEvent) -> None:
        amount, account = self._check_movement(event)
        available = account.available if account is not None else 0
        if available < amount:
            raise InsufficientFundsError(event.tx_id, event.client_id, amount, available)
        if self.store.has_record(event.tx_id):
            raise DuplicateTxError(event.tx_id, event.client_id)

        self.store.insert_record(
            TransactionRecord(
                tx_id=event.tx_id,
                owner_client_id=event.client_id,
                kind=TransactionKind.WITHDRAWAL,
                amount=amount,
            )
        )
        account = self.store.get_or_create_account(event.client_id)
        account.available -= amount

    # ------------------------------------------------------------------
    # Dispute / Resolve / Chargeback
    # ------------------------------------------------------------------

    def _begin_transition(self, event: TransactionEvent) -> tuple[TransactionRecord, Account]:
        """Validate a dispute-family event; return the record and its owner's account."""
        record = self.store.get_record(event.tx_id)
        if record is None:
            raise UnknownTxError(event.tx_id, event.client_id)
        if record.owner_client_id != event.client_id:
            raise WrongOwnerError(event.tx_id, event.client_id, record.owner_client_id)
        allowed_from, _ = DISPUTE_TRANSITIONS[event.kind]
        if record.dispute_state not in allowed_from:
            raise InvalidDisputeStateError(
                event.tx_id, event.client_id, record.dispute_state.value, event.kind.value
            )
        # a record is only inserted together with its owner's account
        account = self.store.get_account(record.owner_client_id)
        if account is None:
            raise InternalError(f"record {record.tx_id} exists without an account")
        return record, account

    def _dispute(self, event: TransactionEvent) -> None:
        record, account = self._begin_transition(event)
        # Applies to withdrawals too; available may go negative.
        account.available -= record.amount
        account.held += record.amount
        record.dispute_state = DISPUTE_TRANSITIONS[EventKind.DISPUTE][1]

    def _resolve(self, event: TransactionEvent) -> None:
        record, account = self._begin_transition(event)
        account.held -= record.amount
        account.available += record.amount
        record.dispute_state = DISPUTE_TRANSITIONS[EventKind.RESOLVE][1]

    def _chargeback(self, event: TransactionEvent) -> None:
        record, account = self._begin_transition(event)
        # Deposit: held funds leave the system.
        # Withdrawal: the original debit stands, nothing is credited back to available.
        account.held -= record.amount
        account.frozen = True
        record.dispute_state = DISPUTE_TRANSITIONS[EventKind.CHARGEBACK][1]
        logger.info(
            "Chargeback on %s tx=%d froze client=%d",
            record.kind.value,
            record.tx_id,
            account.client_id,
        )
