"""Shared test fixtures."""

import pytest

from src.pe_ledger.domain.processor import TransactionProcessor
from src.pe_ledger.domain.store import LedgerStore


@pytest.fixture
def store() -> LedgerStore:
    return LedgerStore()


@pytest.fixture
def processor(store: LedgerStore) -> TransactionProcessor:
    return TransactionProcessor(store)
