# apps/ledger/utils.py

import logging

from django.db import transaction
from django.db.models import Q

from algorithms.balance_history import reconstruct_balances
from apps.accounts.models import User
from apps.admin_dashboard.utils import record_audit
from .models import Transaction

logger = logging.getLogger('nada')

ADJUSTMENT_KINDS = {
    'charge': 'Admin charge',
    'deduct': 'Admin deduction',
}


class InvalidAdjustment(ValueError):
    pass


def find_user_by_nickname(nickname):
    """Exact nickname match; the first hit when several share it"""
    nickname = (nickname or '').strip()
    if not nickname:
        return None
    return User.objects.filter(nickname=nickname).order_by('created_at').first()


def user_transactions(user):
    """Every record where the user is sender or receiver, each once"""
    return Transaction.objects.filter(
        Q(sender=user) | Q(receiver=user)
    ).select_related('sender', 'receiver').distinct()


def balance_history(user):
    """Records newest first, each paired with the balance right after it"""
    return reconstruct_balances(user.pk, user.np_balance, user_transactions(user))


def adjust_balance(user, kind, amount, actor):
    """
    Charge or deduct NP on an admin's behalf

    A deduction never takes the balance below zero; the record stores the
    delta actually applied so the history stays exact.

    Returns:
        Transaction: the record written
    """
    if kind not in ADJUSTMENT_KINDS:
        raise InvalidAdjustment(f"Unknown adjustment: {kind!r}")

    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidAdjustment("Amount must be a positive whole number")

    with transaction.atomic():
        user = User.objects.select_for_update().get(pk=user.pk)
        previous = user.np_balance

        if kind == 'charge':
            delta = amount
        else:
            delta = -min(amount, previous)

        user.np_balance = previous + delta
        user.save(update_fields=['np_balance'])

        record = Transaction.objects.create(
            sender=None,
            receiver=user,
            amount=delta,
            context=ADJUSTMENT_KINDS[kind],
        )

        record_audit(
            actor, 'np_adjust',
            f"{ADJUSTMENT_KINDS[kind]} of {amount} NP for {user.display_name} ({previous} -> {user.np_balance})",
            target_user=user,
            target=record,
            metadata={'kind': kind, 'requested': amount, 'applied': delta, 'balance': user.np_balance}
        )

    logger.info(f"NP {kind} {delta:+d} for {user.email} by {actor.email}")
    return record
