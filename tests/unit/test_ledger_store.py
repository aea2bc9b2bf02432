import pytest

from src.pe_common.enums import TransactionKind
from src.pe_common.errors import DuplicateTxError
from src.pe_ledger.domain.models import TransactionRecord
from src.pe_ledger.domain.store import LedgerStore


def _record(tx_id: int, client_id: int = 1, amount: int = 100) -> TransactionRecord:
    return TransactionRecord(
        tx_id=tx_id,
        owner_client_id=client_id,
        kind=TransactionKind.DEPOSIT,
        amount=amount,
    )


class TestAccounts:
    def test_get_or_create_creates_zeroed_account(self, store: LedgerStore) -> None:
        account = store.get_or_create_account(7)
        assert account.client_id == 7
        assert account.total == 0
        assert account.frozen is False

    def test_get_or_create_returns_same_object(self, store: LedgerStore) -> None:
        first = store.get_or_create_account(7)
        first.available = 42
        assert store.get_or_create_account(7) is first
        assert store.get_or_create_account(7).available == 42

    def test_get_account_does_not_create(self, store: LedgerStore) -> None:
        assert store.get_account(7) is None
        assert store.accounts() == []

    def test_accounts_lists_all(self, store: LedgerStore) -> None:
        store.get_or_create_account(1)
        store.get_or_create_account(2)
        assert {a.client_id for a in store.accounts()} == {1, 2}


class TestRecords:
    def test_insert_and_get(self, store: LedgerStore) -> None:
        record = _record(1)
        store.insert_record(record)
        assert store.get_record(1) is record
        assert store.has_record(1)

    def test_get_unknown_is_none(self, store: LedgerStore) -> None:
        assert store.get_record(99) is None
        assert not store.has_record(99)

    def test_duplicate_insert_raises_and_keeps_original(self, store: LedgerStore) -> None:
        original = _record(1, amount=100)
        store.insert_record(original)
        with pytest.raises(DuplicateTxError) as exc_info:
            store.insert_record(_record(1, client_id=2, amount=999))
        assert exc_info.value.code == 2004
        assert store.get_record(1) is original
        assert len(store.records()) == 1
