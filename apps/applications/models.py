# apps/applications/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class ArtistApplication(models.Model):
    """A user's request to become an artist, with demo tracks"""

    STATUS_CHOICES = (
        ('pending', 'Pending'),
        ('rejected', 'Rejected'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    applicant = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='artist_applications'
    )
    nickname = models.CharField(max_length=50, blank=True)
    profile_image_url = models.URLField(max_length=500, blank=True)
    introduction = models.TextField(blank=True)
    music_urls = models.JSONField(default=list, blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')

    created_at = models.DateTimeField(default=timezone.now)
    rejected_at = models.DateTimeField(null=True, blank=True)
    can_reapply_after = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='applications_status_idx'),
        ]

    def __str__(self):
        return f"{self.nickname or self.applicant} ({self.status})"

    @property
    def is_pending(self):
        return self.status == 'pending'

    @property
    def in_cooldown(self):
        return bool(self.can_reapply_after and timezone.now() < self.can_reapply_after)
