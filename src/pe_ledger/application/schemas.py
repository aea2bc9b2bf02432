"""Pydantic schemas for the input event rows and the output account report."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.pe_common.enums import EventKind
from src.pe_common.units import parse_amount, units_to_display
from src.pe_ledger.domain.models import Account, TransactionEvent

MAX_CLIENT_ID = 65_535
MAX_TX_ID = 4_294_967_295

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class TransactionRow(BaseModel):
    """One CSV row: type, client, tx, amount (amount may be blank or absent)."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    type: EventKind
    client: int = Field(..., ge=0, le=MAX_CLIENT_ID)
    tx: int = Field(..., ge=0, le=MAX_TX_ID)
    amount: int | None = Field(default=None, description="Amount in units of 1/10_000")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            if not value.strip():
                return None
            return parse_amount(value)
        return value

    def to_event(self) -> TransactionEvent:
        return TransactionEvent(
            kind=self.type,
            client_id=self.client,
            tx_id=self.tx,
            amount=self.amount,
        )


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

CSV_HEADER = ["client", "available", "held", "total", "locked"]


class AccountSummary(BaseModel):
    client: int
    available: int
    held: int
    total: int
    locked: bool

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(
            client=account.client_id,
            available=account.available,
            held=account.held,
            total=account.total,
            locked=account.frozen,
        )

    def to_csv_row(self) -> list[str]:
        return [
            str(self.client),
            units_to_display(self.available),
            units_to_display(self.held),
            units_to_display(self.total),
            "true" if self.locked else "false",
        ]
