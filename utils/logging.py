# utils/logging.py

import logging
from django.core.mail import mail_admins
from django.utils import timezone

logger = logging.getLogger('nada')


class ErrorNotificationHandler(logging.Handler):
    """Send email to admins on errors raised by console operations"""

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            subject = f"NADA console error: {record.getMessage()}"
            message = self.format(record)
            mail_admins(subject, message, fail_silently=True)


def log_admin_action(actor, action, details=None):
    """Log console actions alongside the audit table"""
    name = getattr(actor, 'email', None) or 'system'
    logger.info(f"Admin {name} performed {action}", extra={
        'actor_id': str(getattr(actor, 'id', '')),
        'action': action,
        'details': details,
        'timestamp': timezone.now()
    })
