# apps/contact/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class ContactMessage(models.Model):
    """Message sent through the app's contact form"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='contact_messages'
    )
    nickname = models.CharField(max_length=50, blank=True)
    email = models.EmailField(blank=True)
    message = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    is_resolved = models.BooleanField(default=False)
    resolved_at = models.DateTimeField(null=True, blank=True)
    resolved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='resolved_contact_messages'
    )

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.display_nickname}: {self.display_message[:50]}"

    @property
    def display_nickname(self):
        return self.nickname or 'Anonymous'

    @property
    def display_message(self):
        return self.message or '(empty message)'

    def resolve(self, admin):
        self.is_resolved = True
        self.resolved_at = timezone.now()
        self.resolved_by = admin
        self.save(update_fields=['is_resolved', 'resolved_at', 'resolved_by'])
