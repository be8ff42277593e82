# apps/posts/models.py

from django.db import models
from django.conf import settings
from django.utils import timezone
import uuid


class Post(models.Model):
    """Post on the public feed, or on an artist's fan board"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts'
    )
    # Set for fan posts: the artist whose board the post lives on
    board_owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='fan_board_posts'
    )

    content = models.TextField(max_length=5000, blank=True)
    image_url = models.URLField(max_length=500, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['author', '-created_at'], name='posts_author_created_idx'),
            models.Index(fields=['board_owner', '-created_at'], name='posts_board_created_idx'),
        ]

    def __str__(self):
        return f"{self.author}: {self.content[:50]}"

    @property
    def is_fan_post(self):
        return self.board_owner_id is not None


class Comment(models.Model):
    """Comment on a post or on a song; a reply when parent is set"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    nickname = models.CharField(max_length=50, blank=True)
    content = models.TextField(max_length=1000)

    post = models.ForeignKey(Post, on_delete=models.CASCADE, null=True, blank=True, related_name='comments')
    song = models.ForeignKey('songs.Song', on_delete=models.CASCADE, null=True, blank=True, related_name='comments')
    parent = models.ForeignKey('self', on_delete=models.CASCADE, null=True, blank=True, related_name='replies')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return f"{self.nickname or self.author}: {self.content[:50]}"

    @property
    def is_reply(self):
        return self.parent_id is not None
