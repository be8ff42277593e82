# apps/admin_dashboard/utils.py

from datetime import timedelta

from django.utils import timezone

from utils.logging import log_admin_action
from .models import AdminAuditLog


def record_audit(actor, action_type, description, target_user=None, target=None,
                 metadata=None, ip_address=None):
    """
    Write one audit row for an admin mutation

    `target` is the model instance acted on, when there is one.
    """
    entry = AdminAuditLog.objects.create(
        admin_user=actor,
        action_type=action_type,
        description=description,
        target_user=target_user,
        target_object_type=target._meta.model_name if target is not None else '',
        target_object_id=str(target.pk) if target is not None else '',
        metadata=metadata or {},
        ip_address=ip_address,
    )
    log_admin_action(actor, action_type, details=description)
    return entry


def recent_activity(limit=10):
    return AdminAuditLog.objects.select_related('admin_user', 'target_user')[:limit]


def activity_since(days=7):
    since = timezone.now() - timedelta(days=days)
    return AdminAuditLog.objects.filter(created_at__gte=since).count()
