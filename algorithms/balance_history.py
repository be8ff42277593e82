# algorithms/balance_history.py

"""
NP Balance History
Rebuilds the balance a user held right after each of their transactions.

Only the current balance is stored on the user, so every past balance is
derived by walking the transaction log backwards from the present.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List


@dataclass(frozen=True)
class BalanceEntry:
    """A transaction paired with the balance that existed right after it"""
    record: Any
    balance_after: int


def balance_delta(subject_id, record):
    """
    Signed effect of a record on the subject's balance

    Receiving credits the signed amount, sending debits it.
    """
    is_receiver = record.receiver_id == subject_id
    is_sender = record.sender_id == subject_id

    if is_receiver and is_sender:
        return 0
    if is_receiver:
        return record.amount
    if is_sender:
        return -record.amount
    return 0


def chronological(records: Iterable[Any]) -> List[Any]:
    """Oldest first; identical timestamps fall back to the record id"""
    return sorted(records, key=lambda r: (r.created_at, str(r.id)))


def reconstruct_balances(subject_id, current_balance: int, records: Iterable[Any]) -> List[BalanceEntry]:
    """
    Annotate records with the balance right after each one was applied

    Args:
        subject_id: id of the user whose history is rebuilt
        current_balance: the user's balance now
        records: transactions where the user is sender or receiver

    Returns:
        list: BalanceEntry objects, newest first
    """
    running = current_balance
    entries = []

    for record in reversed(chronological(records)):
        entries.append(BalanceEntry(record=record, balance_after=running))
        running -= balance_delta(subject_id, record)

    return entries


def opening_balance(subject_id, current_balance: int, records: Iterable[Any]) -> int:
    """Balance before the oldest record was applied"""
    running = current_balance
    for record in records:
        running -= balance_delta(subject_id, record)
    return running
