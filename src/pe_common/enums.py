"""Global enums: EventKind values match the CSV `type` column exactly."""

from enum import Enum


class EventKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class TransactionKind(str, Enum):
    """Kinds of events that are stored as disputable records."""
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class DisputeState(str, Enum):
    """Per-record dispute lifecycle. CHARGED_BACK is terminal."""
    CLEAN = "CLEAN"
    DISPUTED = "DISPUTED"
    RESOLVED = "RESOLVED"
    CHARGED_BACK = "CHARGED_BACK"


class TxErrorKind(str, Enum):
    INVALID_AMOUNT = "INVALID_AMOUNT"
    ACCOUNT_FROZEN = "ACCOUNT_FROZEN"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    DUPLICATE_TX = "DUPLICATE_TX"
    UNKNOWN_TX = "UNKNOWN_TX"
    WRONG_OWNER = "WRONG_OWNER"
    INVALID_DISPUTE_STATE = "INVALID_DISPUTE_STATE"
