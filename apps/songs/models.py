# apps/songs/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid

from algorithms import song_lifecycle as lifecycle


class SongQuerySet(models.QuerySet):

    def with_status(self, status):
        """Songs whose stored flags read as the given lifecycle status"""
        if status == lifecycle.DELETED:
            return self.filter(is_deleted=True)
        is_pending, is_visible, _ = lifecycle.STATUS_FLAGS[status]
        queryset = self.filter(is_deleted=False, is_pending=is_pending)
        if not is_pending:
            queryset = queryset.filter(is_visible=is_visible)
        return queryset


class Song(models.Model):
    """Uploaded track moving through review: pending, approved, paused, deleted"""

    GENRES = settings.NADA_SETTINGS['SONG_GENRES']

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='songs'
    )
    title = models.CharField(max_length=200)
    nickname = models.CharField(max_length=50, blank=True)
    genre = models.CharField(max_length=20, choices=GENRES, blank=True)

    audio_url = models.URLField(max_length=500, blank=True)
    image_url = models.URLField(max_length=500, blank=True)

    # Lifecycle flags
    is_pending = models.BooleanField(default=True)
    is_visible = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)

    likes_count = models.IntegerField(default=0)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SongQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_pending', 'is_visible', 'is_deleted'], name='songs_status_flags_idx'),
            models.Index(fields=['genre'], name='songs_genre_idx'),
        ]

    def __str__(self):
        return f"{self.title} - {self.nickname or self.owner}"

    @property
    def status(self):
        return lifecycle.status_from_flags(self.is_pending, self.is_visible, self.is_deleted)

    @property
    def allowed_actions(self):
        return lifecycle.allowed_actions(self.status)

    def apply_status(self, status):
        """Store the flags for a live status"""
        self.is_pending, self.is_visible, self.is_deleted = lifecycle.STATUS_FLAGS[status]
        self.save(update_fields=['is_pending', 'is_visible', 'is_deleted', 'updated_at'])

    def transition(self, action):
        """
        Apply a lifecycle action and return the new status

        'purge' removes the row; the caller is responsible for the blobs.
        Raises InvalidSongTransition for any action not allowed from the
        current status.
        """
        new_status = lifecycle.next_status(self.status, action)

        if new_status == lifecycle.PURGED:
            self.delete()
        else:
            self.apply_status(new_status)

        return new_status
