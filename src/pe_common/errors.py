"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Input records
  2xxx: Transaction rejections (closed set, see TxErrorKind)
  9xxx: System
"""

from src.pe_common.enums import TxErrorKind


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Input records ---

class MalformedRecordError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Malformed record: {detail}")


# --- 2xxx: Transaction rejections ---

class TxError(AppError):
    """An event the processor refused. State is untouched when this is raised."""

    kind: TxErrorKind

    def __init__(self, code: int, message: str, tx_id: int, client_id: int) -> None:
        self.tx_id = tx_id
        self.client_id = client_id
        super().__init__(code, message)


class InvalidAmountError(TxError):
    kind = TxErrorKind.INVALID_AMOUNT

    def __init__(self, tx_id: int, client_id: int, amount: int | None) -> None:
        super().__init__(2001, f"Invalid amount {amount} for tx {tx_id}", tx_id, client_id)


class AccountFrozenError(TxError):
    kind = TxErrorKind.ACCOUNT_FROZEN

    def __init__(self, tx_id: int, client_id: int) -> None:
        super().__init__(2002, f"Account {client_id} is frozen", tx_id, client_id)


class InsufficientFundsError(TxError):
    kind = TxErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, tx_id: int, client_id: int, required: int, available: int) -> None:
        super().__init__(
            2003,
            f"Insufficient funds: required {required} units, available {available} units",
            tx_id,
            client_id,
        )


class DuplicateTxError(TxError):
    kind = TxErrorKind.DUPLICATE_TX

    def __init__(self, tx_id: int, client_id: int) -> None:
        super().__init__(2004, f"Transaction {tx_id} already exists", tx_id, client_id)


class UnknownTxError(TxError):
    kind = TxErrorKind.UNKNOWN_TX

    def __init__(self, tx_id: int, client_id: int) -> None:
        super().__init__(2005, f"Transaction {tx_id} not found", tx_id, client_id)


class WrongOwnerError(TxError):
    kind = TxErrorKind.WRONG_OWNER

    def __init__(self, tx_id: int, client_id: int, owner_client_id: int) -> None:
        super().__init__(
            2006,
            f"Transaction {tx_id} belongs to client {owner_client_id}, not {client_id}",
            tx_id,
            client_id,
        )


class InvalidDisputeStateError(TxError):
    kind = TxErrorKind.INVALID_DISPUTE_STATE

    def __init__(self, tx_id: int, client_id: int, state: str, action: str) -> None:
        super().__init__(
            2007,
            f"Transaction {tx_id} in state {state} cannot accept {action}",
            tx_id,
            client_id,
        )


# --- 9xxx: System ---

class InvariantViolationError(AppError):
    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(9001, "; ".join(violations))


class InternalError(AppError):
    def __init__(self, detail: str = "Internal error") -> None:
        super().__init__(9002, detail)
