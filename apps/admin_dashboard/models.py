# apps/admin_dashboard/models.py
"""
Admin Dashboard Models for the NADA console
"""

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class AdminAuditLog(models.Model):
    """Audit log for admin actions"""

    ACTION_TYPES = (
        ('console_login', 'Console Sign-in'),
        ('user_suspend', 'User Suspension'),
        ('user_unsuspend', 'User Unsuspension'),
        ('user_ban', 'Permanent Ban'),
        ('artist_level', 'Artist Tier Change'),
        ('admin_grant', 'Admin Role Granted'),
        ('admin_revoke', 'Admin Role Revoked'),
        ('report_innocent', 'Report Dismissed'),
        ('report_guilty', 'Report Upheld'),
        ('guilty_delete', 'Guilty Record Deleted'),
        ('song_transition', 'Song Status Change'),
        ('np_adjust', 'NP Adjustment'),
        ('application_approve', 'Application Approved'),
        ('application_reject', 'Application Rejected'),
        ('application_reapply', 'Application Reopened'),
        ('application_discard', 'Application Discarded'),
        ('contact_resolve', 'Contact Message Resolved'),
        ('contact_delete', 'Contact Message Deleted'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    admin_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='admin_audit_logs'
    )

    action_type = models.CharField(max_length=50, choices=ACTION_TYPES)
    description = models.TextField()

    # Target information
    target_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='admin_actions_received'
    )
    target_object_type = models.CharField(max_length=50, blank=True)
    target_object_id = models.CharField(max_length=100, blank=True)

    # Additional data
    metadata = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['admin_user', '-created_at'], name='audit_admin_created_idx'),
            models.Index(fields=['action_type', '-created_at'], name='audit_action_created_idx'),
        ]

    def __str__(self):
        admin_name = self.admin_user.email if self.admin_user else 'deleted admin'
        return f"{admin_name} - {self.get_action_type_display()} - {self.created_at}"
