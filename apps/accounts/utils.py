# apps/accounts/utils.py

import logging

from django.db import transaction
from django.db.models import Q

from algorithms import suspension as rules
from apps.accounts.models import User

logger = logging.getLogger('nada')

USER_FILTERS = ('all', 'user', 'artist', 'suspended')


class AdminRoleError(PermissionError):
    """Raised when an admin-role change is not allowed for the acting user"""


def get_client_ip(request):
    """Get client IP address"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or None


def suspended_users_q():
    """
    Accounts with any suspension on record

    Lapsed timed suspensions stay listed (reading as expired) until an admin
    lifts them.
    """
    return Q(is_permanently_banned=True) | Q(suspended_until__isnull=False)


def filter_users(user_filter='all', level=None, search=None):
    """
    User list for the console

    Args:
        user_filter: all | user | artist | suspended
        level: artist tier, applied when listing artists
        search: substring of nickname or email
    """
    queryset = User.objects.all()

    if user_filter == 'user':
        queryset = queryset.filter(is_artist=False)
    elif user_filter == 'artist':
        queryset = queryset.filter(is_artist=True)
        if level:
            queryset = queryset.filter(artist_level=level)
    elif user_filter == 'suspended':
        queryset = queryset.filter(suspended_users_q())

    if search:
        queryset = queryset.filter(
            Q(nickname__icontains=search) | Q(email__icontains=search)
        )

    return queryset


def user_filter_counts():
    return {
        'all': User.objects.count(),
        'user': User.objects.filter(is_artist=False).count(),
        'artist': User.objects.filter(is_artist=True).count(),
        'suspended': User.objects.filter(suspended_users_q()).count(),
    }


def suspend_user(user, duration, actor):
    """Suspend from the user list; duration is a key such as '3d' or 'permanent'"""
    from apps.admin_dashboard.utils import record_audit

    if not rules.is_valid_duration(duration):
        raise ValueError(f"Unknown suspension duration: {duration!r}")

    with transaction.atomic():
        user = User.objects.select_for_update().get(pk=user.pk)
        user.suspend(duration)
        record_audit(
            actor, 'user_suspend',
            f"Suspended {user.display_name} ({rules.DURATION_LABELS[duration]})",
            target_user=user,
            metadata={'duration': duration, 'suspended_until': str(user.suspended_until)}
        )

    logger.info(f"User {user.email} suspended ({duration}) by {actor.email}")
    return user


def unsuspend_user(user, actor):
    from apps.admin_dashboard.utils import record_audit

    with transaction.atomic():
        user = User.objects.select_for_update().get(pk=user.pk)
        user.lift_suspension()
        record_audit(actor, 'user_unsuspend', f"Lifted suspension of {user.display_name}", target_user=user)

    logger.info(f"User {user.email} unsuspended by {actor.email}")
    return user


def change_artist_level(user, level, actor):
    from apps.admin_dashboard.utils import record_audit

    if not user.is_artist:
        raise ValueError("Only artists have a tier")

    previous = user.artist_level
    user.set_artist_level(level)
    record_audit(
        actor, 'artist_level',
        f"Changed tier of {user.display_name}: {previous} -> {level}",
        target_user=user,
        metadata={'from': previous, 'to': level}
    )
    return user


def set_admin_role(user, make_admin, actor):
    """
    Grant or revoke console access

    Only superusers may change the role, and nobody may revoke their own.
    """
    from apps.admin_dashboard.utils import record_audit

    if actor is None or not actor.is_superuser:
        raise AdminRoleError("Only a superuser can change admin roles")

    if not make_admin and user.pk == actor.pk:
        raise AdminRoleError("You cannot revoke your own admin role")

    if user.is_admin == make_admin:
        return user

    user.is_admin = make_admin
    user.save(update_fields=['is_admin'])

    record_audit(
        actor, 'admin_grant' if make_admin else 'admin_revoke',
        f"{'Granted' if make_admin else 'Revoked'} admin role for {user.display_name}",
        target_user=user
    )
    logger.warning(f"Admin role {'granted to' if make_admin else 'revoked from'} {user.email} by {actor.email}")
    return user
