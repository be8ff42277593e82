# apps/songs/utils.py

import logging

from django.db import transaction
from django.db.models import Q

from algorithms import song_lifecycle as lifecycle
from apps.admin_dashboard.utils import record_audit
from apps.notifications.utils import notify_on_commit
from utils.storage import delete_stored_files
from .models import Song

logger = logging.getLogger('nada')

OWNER_MESSAGES = {
    'approve': 'Your song "{title}" has been approved and is now public.',
    'reject': 'Your song "{title}" was not approved.',
    'pause': 'Your song "{title}" has been paused by an administrator.',
    'resume': 'Your song "{title}" is public again.',
    'delete': 'Your song "{title}" has been removed.',
    'restore': 'Your song "{title}" has been restored.',
    'purge': 'Your song "{title}" has been permanently deleted.',
}


def songs_by_status(status, genre=None, search=None):
    queryset = Song.objects.with_status(status).select_related('owner')

    if genre:
        queryset = queryset.filter(genre=genre)

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) | Q(nickname__icontains=search)
        )

    return queryset


def status_counts():
    return {status: Song.objects.with_status(status).count() for status in lifecycle.STATUSES}


def transition_song(song, action, actor):
    """
    Move a song through its lifecycle

    The owner is told about every change once the transaction commits; a
    purge also removes the audio and cover blobs. Returns the new status.
    """
    with transaction.atomic():
        song = Song.objects.select_for_update().get(pk=song.pk)
        previous = song.status
        owner = song.owner
        song_id = song.pk
        title = song.title
        blob_urls = [song.audio_url, song.image_url]

        new_status = song.transition(action)

        record_audit(
            actor, 'song_transition',
            f'{action.capitalize()} "{title}" ({previous} -> {new_status})',
            target_user=owner,
            metadata={'song_id': str(song_id), 'action': action, 'from': previous, 'to': new_status}
        )

        notify_on_commit(owner, OWNER_MESSAGES[action].format(title=title), 'song', song_id)

        if new_status == lifecycle.PURGED:
            transaction.on_commit(lambda: delete_stored_files(blob_urls))

    logger.info(f"Song {song_id} {previous} -> {new_status} by {actor.email}")
    return new_status
