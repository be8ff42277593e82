# apps/notifications/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class Notification(models.Model):
    """Message delivered to a platform user by the console"""

    NOTIFICATION_TYPES = (
        ('song', 'Song Review'),
        ('application', 'Artist Application'),
        ('moderation', 'Moderation'),
        ('system', 'System Notification'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )

    notification_type = models.CharField(max_length=30, choices=NOTIFICATION_TYPES, default='system')
    message = models.CharField(max_length=255)
    target_id = models.CharField(max_length=100, blank=True)

    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['recipient', '-created_at'], name='notif_recipient_created_idx'),
            models.Index(fields=['recipient', 'is_read'], name='notif_recipient_read_idx'),
        ]

    def __str__(self):
        return f"{self.recipient}: {self.message}"

    def mark_as_read(self):
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()
            self.save(update_fields=['is_read', 'read_at'])

    def to_payload(self):
        return {
            'id': str(self.id),
            'type': self.notification_type,
            'message': self.message,
            'target_id': self.target_id,
            'is_read': self.is_read,
            'created_at': self.created_at.isoformat(),
        }
