"""Ledger invariant checks (INV-A per account, INV-G across the whole store)."""

import logging
from collections import defaultdict

from src.pe_common.enums import DisputeState, TransactionKind
from src.pe_ledger.domain.models import Account
from src.pe_ledger.domain.store import LedgerStore

logger = logging.getLogger(__name__)


def check_account(account: Account) -> list[str]:
    """INV-A: held >= 0 and total == available + held."""
    violations: list[str] = []
    if account.held < 0:
        violations.append(f"INV-A violated: client={account.client_id} held={account.held} < 0")
    if account.total != account.available + account.held:
        violations.append(
            f"INV-A violated: client={account.client_id} total={account.total} "
            f"!= available({account.available}) + held({account.held})"
        )
    return violations


def verify_ledger_invariants(store: LedgerStore) -> list[str]:
    """Check every account plus the cross-record invariants. Returns list of violation strings.

    INV-H: an account's held equals the sum of its DISPUTED record amounts
    INV-F: the owner of a CHARGED_BACK record is frozen
    INV-G: sum(total) == deposits - withdrawals - charged-back amounts
    """
    violations: list[str] = []
    held_by_client: dict[int, int] = defaultdict(int)
    net_flow = 0

    for account in store.accounts():
        violations.extend(check_account(account))

    for record in store.records():
        sign = 1 if record.kind == TransactionKind.DEPOSIT else -1
        net_flow += sign * record.amount
        if record.dispute_state == DisputeState.DISPUTED:
            held_by_client[record.owner_client_id] += record.amount
        elif record.dispute_state == DisputeState.CHARGED_BACK:
            net_flow -= record.amount
            owner = store.get_account(record.owner_client_id)
            if owner is None or not owner.frozen:
                violations.append(
                    f"INV-F violated: tx={record.tx_id} charged back but "
                    f"client={record.owner_client_id} is not frozen"
                )

    for account in store.accounts():
        expected_held = held_by_client.get(account.client_id, 0)
        if account.held != expected_held:
            violations.append(
                f"INV-H violated: client={account.client_id} held={account.held} "
                f"!= disputed_sum={expected_held}"
            )

    total = sum(account.total for account in store.accounts())
    if total != net_flow:
        violations.append(f"INV-G violated: sum_total={total} != net_flow={net_flow}")

    for msg in violations:
        logger.error(msg)
    if not violations:
        logger.debug(
            "Invariants OK: accounts=%d, records=%d, total=%d",
            len(store.accounts()),
            len(store.records()),
            total,
        )
    return violations
