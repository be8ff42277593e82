"""
test_algorithms_core.py

Tests for core algorithms that don't require the database
"""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from algorithms import song_lifecycle as lifecycle
from algorithms import suspension as rules
from algorithms.balance_history import balance_delta, chronological, reconstruct_balances, opening_balance
from utils.storage import storage_path_from_url

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
ME = uuid.uuid4()
OTHER = uuid.uuid4()


def record(amount, sender=None, receiver=ME, minutes=0, record_id=None):
    return SimpleNamespace(
        id=record_id or uuid.uuid4(),
        sender_id=sender,
        receiver_id=receiver,
        amount=amount,
        created_at=NOW + timedelta(minutes=minutes),
    )


class TestBalanceHistory:
    """Running balances rebuilt from the current balance"""

    def test_delta_by_side(self):
        assert balance_delta(ME, record(30)) == 30
        assert balance_delta(ME, record(30, sender=ME, receiver=OTHER)) == -30
        assert balance_delta(ME, record(-12)) == -12
        assert balance_delta(ME, record(30, sender=OTHER, receiver=OTHER)) == 0

    def test_self_transfer_is_neutral(self):
        assert balance_delta(ME, record(99, sender=ME, receiver=ME)) == 0

    def test_scenario(self):
        charge = record(50, minutes=0)
        gift = record(20, sender=ME, receiver=OTHER, minutes=10)
        deduction = record(-5, minutes=20)

        entries = reconstruct_balances(ME, 125, [gift, deduction, charge])

        assert [e.record for e in entries] == [deduction, gift, charge]
        assert [e.balance_after for e in entries] == [125, 130, 150]
        assert opening_balance(ME, 125, [charge, gift, deduction]) == 100

    def test_newest_entry_is_current_balance(self):
        records = [record(amount, minutes=i) for i, amount in enumerate([10, -3, 7, 1])]
        entries = reconstruct_balances(ME, 42, records)
        assert entries[0].balance_after == 42
        assert len(entries) == len(records)

    def test_consecutive_entries_differ_by_delta(self):
        records = [record(amount, minutes=i) for i, amount in enumerate([10, -3, 7, 1])]
        entries = reconstruct_balances(ME, 42, records)

        for newer, older in zip(entries, entries[1:]):
            assert newer.balance_after - older.balance_after == balance_delta(ME, newer.record)

    def test_repeatable(self):
        records = [record(5, minutes=2), record(8, sender=ME, receiver=OTHER, minutes=1)]
        assert reconstruct_balances(ME, 30, records) == reconstruct_balances(ME, 30, list(reversed(records)))

    def test_same_timestamp_ordered_by_id(self):
        first = record(1, record_id=uuid.UUID(int=1))
        second = record(2, record_id=uuid.UUID(int=2))
        assert chronological([second, first]) == [first, second]

    def test_no_records(self):
        assert reconstruct_balances(ME, 10, []) == []
        assert opening_balance(ME, 10, []) == 10


class TestSuspensionRules:
    """Durations and read-time suspension status"""

    def test_expiry(self):
        assert rules.suspension_expiry('1m', NOW) == NOW + timedelta(minutes=1)
        assert rules.suspension_expiry('5d', NOW) == NOW + timedelta(days=5)
        assert rules.suspension_expiry(rules.PERMANENT, NOW) is None

    def test_unknown_duration(self):
        assert not rules.is_valid_duration('7d')
        with pytest.raises(ValueError):
            rules.suspension_expiry('7d', NOW)

    def test_offered_durations_are_valid(self):
        for duration in rules.VERDICT_DURATIONS + rules.USER_DURATIONS:
            assert rules.is_valid_duration(duration)
            assert duration in rules.DURATION_LABELS

    @pytest.mark.parametrize('until, banned, expected', [
        (None, False, rules.STATUS_NORMAL),
        (NOW + timedelta(seconds=1), False, rules.STATUS_SUSPENDED),
        (NOW, False, rules.STATUS_EXPIRED),
        (NOW - timedelta(days=1), False, rules.STATUS_EXPIRED),
        (None, True, rules.STATUS_BANNED),
        (NOW - timedelta(days=1), True, rules.STATUS_BANNED),
    ])
    def test_status(self, until, banned, expected):
        assert rules.suspension_status(until, banned, NOW) == expected

    def test_restricted(self):
        assert rules.is_restricted(rules.STATUS_SUSPENDED)
        assert rules.is_restricted(rules.STATUS_BANNED)
        assert not rules.is_restricted(rules.STATUS_EXPIRED)


class TestSongLifecycle:
    """Status flags and allowed actions"""

    def test_flags_round_trip(self):
        for status, flags in lifecycle.STATUS_FLAGS.items():
            assert lifecycle.status_from_flags(*flags) == status

    def test_deleted_wins(self):
        assert lifecycle.status_from_flags(True, True, True) == lifecycle.DELETED

    def test_allowed_actions(self):
        assert lifecycle.allowed_actions(lifecycle.PENDING) == ['approve', 'reject']
        assert lifecycle.allowed_actions(lifecycle.PAUSED) == ['resume', 'delete']
        assert lifecycle.allowed_actions(lifecycle.DELETED) == ['restore', 'purge']

    def test_invalid_transition(self):
        with pytest.raises(lifecycle.InvalidSongTransition):
            lifecycle.next_status(lifecycle.PENDING, 'pause')
        with pytest.raises(lifecycle.InvalidSongTransition):
            lifecycle.next_status(lifecycle.APPROVED, 'purge')

    def test_purge_only_from_deleted(self):
        assert lifecycle.next_status(lifecycle.DELETED, 'purge') == lifecycle.PURGED


class TestStoragePaths:
    """Object paths pulled out of download URLs"""

    def test_encoded_path(self):
        url = 'https://storage.test/v0/b/nada.appspot.com/o/songs%2Fuser1%2Ftrack.mp3?alt=media&token=abc'
        assert storage_path_from_url(url) == 'songs/user1/track.mp3'

    def test_not_a_download_url(self):
        assert storage_path_from_url('https://cdn.test/images/cover.png') is None
        assert storage_path_from_url('') is None
        assert storage_path_from_url(None) is None
