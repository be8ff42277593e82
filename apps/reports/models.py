# apps/reports/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class ReportFields(models.Model):
    """Fields shared by open reports and adjudicated ones"""

    REPORT_TYPES = (
        ('post', 'Post Report'),
        ('comment', 'Comment Report'),
        ('song', 'Song Report'),
    )

    report_type = models.CharField(max_length=20, choices=REPORT_TYPES)

    # Target and the containers needed to find it
    target_id = models.CharField(max_length=100)
    post_id = models.CharField(max_length=100, blank=True)
    song_id = models.CharField(max_length=100, blank=True)
    parent_comment_id = models.CharField(max_length=100, blank=True)
    board_owner_id = models.CharField(max_length=100, blank=True)

    # People involved; nicknames are kept in case the account goes away
    reporter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    reporter_nickname = models.CharField(max_length=50, blank=True)
    reported_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    reported_user_nickname = models.CharField(max_length=50, blank=True)

    reason = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    # Evidence copied from the content
    content_snapshot = models.TextField(blank=True)
    image_snapshot = models.URLField(max_length=500, blank=True)
    nickname_snapshot = models.CharField(max_length=50, blank=True)

    class Meta:
        abstract = True

    @property
    def has_snapshot(self):
        return bool(self.content_snapshot or self.image_snapshot)

    @property
    def reporter_label(self):
        return self.reporter_nickname or (str(self.reporter_id) if self.reporter_id else 'unknown')

    @property
    def reported_user_label(self):
        return self.reported_user_nickname or (str(self.reported_user_id) if self.reported_user_id else 'unknown')


class Report(ReportFields):
    """Report waiting for a verdict"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['report_type', 'created_at'], name='reports_type_created_idx'),
        ]

    def __str__(self):
        return f"{self.get_report_type_display()} - {self.reason[:40]}"


class GuiltyReport(ReportFields):
    """Report upheld by an admin; keeps the id of the report it came from"""

    id = models.UUIDField(primary_key=True, editable=False)

    adjudicated_at = models.DateTimeField(default=timezone.now)
    adjudicated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='guilty_verdicts'
    )
    suspension = models.CharField(max_length=20, blank=True)

    class Meta:
        ordering = ['-adjudicated_at']
        indexes = [
            models.Index(fields=['report_type', '-adjudicated_at'], name='reports_guilty_type_idx'),
        ]

    def __str__(self):
        return f"Guilty {self.get_report_type_display()} - {self.reported_user_label}"
