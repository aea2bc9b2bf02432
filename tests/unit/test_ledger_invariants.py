"""Tests for pe_ledger.domain.invariants."""

import logging

import pytest

from src.pe_common.enums import DisputeState, EventKind, TransactionKind
from src.pe_ledger.domain.invariants import check_account, verify_ledger_invariants
from src.pe_ledger.domain.models import Account, TransactionEvent, TransactionRecord
from src.pe_ledger.domain.processor import TransactionProcessor
from src.pe_ledger.domain.store import LedgerStore


class TestCheckAccount:
    def test_healthy_account(self) -> None:
        assert check_account(Account(client_id=1, available=-5, held=5)) == []

    def test_negative_held(self) -> None:
        violations = check_account(Account(client_id=1, available=10, held=-1))
        assert len(violations) == 1
        assert "INV-A" in violations[0]


class TestVerifyLedgerInvariants:
    def test_empty_store(self, store: LedgerStore) -> None:
        assert verify_ledger_invariants(store) == []

    def test_after_full_lifecycle(self, processor: TransactionProcessor, store: LedgerStore) -> None:
        for event in [
            TransactionEvent(EventKind.DEPOSIT, 1, 1, 100_000),
            TransactionEvent(EventKind.WITHDRAWAL, 1, 2, 30_000),
            TransactionEvent(EventKind.DEPOSIT, 2, 3, 50_000),
            TransactionEvent(EventKind.DISPUTE, 1, 2),
            TransactionEvent(EventKind.CHARGEBACK, 1, 2),
            TransactionEvent(EventKind.DISPUTE, 2, 3),
            TransactionEvent(EventKind.RESOLVE, 2, 3),
            TransactionEvent(EventKind.DISPUTE, 2, 3),
        ]:
            processor.apply(event)
        assert verify_ledger_invariants(store) == []

    def test_held_mismatch_detected(self, processor: TransactionProcessor, store: LedgerStore) -> None:
        processor.apply(TransactionEvent(EventKind.DEPOSIT, 1, 1, 100_000))
        account = store.get_or_create_account(1)
        account.available -= 10
        account.held += 10
        violations = verify_ledger_invariants(store)
        assert any("INV-H" in v for v in violations)

    def test_unfrozen_chargeback_owner_detected(self, store: LedgerStore) -> None:
        store.get_or_create_account(1)
        store.insert_record(
            TransactionRecord(
                tx_id=1,
                owner_client_id=1,
                kind=TransactionKind.DEPOSIT,
                amount=100,
                dispute_state=DisputeState.CHARGED_BACK,
            )
        )
        violations = verify_ledger_invariants(store)
        assert any("INV-F" in v for v in violations)

    def test_net_flow_mismatch_detected(self, processor: TransactionProcessor, store: LedgerStore) -> None:
        processor.apply(TransactionEvent(EventKind.DEPOSIT, 1, 1, 100_000))
        store.get_or_create_account(1).available += 1
        violations = verify_ledger_invariants(store)
        assert violations == ["INV-G violated: sum_total=100001 != net_flow=100000"]

    def test_violations_are_logged(
        self, store: LedgerStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.get_or_create_account(1).held = -1
        with caplog.at_level(logging.ERROR):
            verify_ledger_invariants(store)
        assert "INV-A violated" in caplog.text
