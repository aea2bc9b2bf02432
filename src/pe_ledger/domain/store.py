"""Ledger Store: owns the client -> Account and tx -> TransactionRecord maps."""

from src.pe_common.errors import DuplicateTxError
from src.pe_ledger.domain.models import Account, TransactionRecord


class LedgerStore:
    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._records: dict[int, TransactionRecord] = {}

    def get_account(self, client_id: int) -> Account | None:
        return self._accounts.get(client_id)

    def get_or_create_account(self, client_id: int) -> Account:
        if client_id not in self._accounts:
            self._accounts[client_id] = Account(client_id=client_id)
        return self._accounts[client_id]

    def get_record(self, tx_id: int) -> TransactionRecord | None:
        return self._records.get(tx_id)

    def has_record(self, tx_id: int) -> bool:
        return tx_id in self._records

    def insert_record(self, record: TransactionRecord) -> None:
        """Raise DuplicateTxError if the tx_id is already taken."""
        if record.tx_id in self._records:
            raise DuplicateTxError(record.tx_id, record.owner_client_id)
        self._records[record.tx_id] = record

    def accounts(self) -> list[Account]:
        return list(self._accounts.values())

    def records(self) -> list[TransactionRecord]:
        return list(self._records.values())
