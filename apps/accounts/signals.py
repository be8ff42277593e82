# apps/accounts/signals.py

import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver
from django.utils import timezone

from .models import LoginHistory
from .session import AdminSession
from .utils import get_client_ip

logger = logging.getLogger('nada')


@receiver(user_logged_in)
def open_admin_session(sender, request, user, **kwargs):
    """Open a LoginHistory row and the session context on sign-in"""
    if request is None:
        return

    now = timezone.now()
    ip_address = get_client_ip(request)

    record = LoginHistory.objects.create(
        user=user,
        ip_address=ip_address,
        user_agent=request.META.get('HTTP_USER_AGENT', ''),
        session_key=request.session.session_key or '',
        login_time=now,
    )

    user.last_active = now
    user.save(update_fields=['last_active'])

    session = AdminSession(
        user=user,
        started_at=now,
        ip_address=ip_address,
        login_record_id=record.id,
    )
    session.store(request)
    request.admin_session = session

    if user.is_admin_user:
        from apps.admin_dashboard.utils import record_audit
        record_audit(user, 'console_login', f"Signed in from {ip_address or 'unknown address'}",
                     ip_address=ip_address)

    logger.info(f"Console sign-in: {user.email}")


@receiver(user_logged_out)
def close_admin_session(sender, request, user, **kwargs):
    """Close the LoginHistory row when the admin signs out"""
    if request is None or user is None:
        return

    session = getattr(request, 'admin_session', None) or AdminSession.from_request(request)
    if session.login_record_id:
        record = LoginHistory.objects.filter(id=session.login_record_id, user=user).first()
        if record:
            record.close()

    AdminSession.clear(request)
    logger.info(f"Console sign-out: {user.email}")
