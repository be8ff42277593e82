# tests/test_songs.py

from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model

from algorithms import song_lifecycle as lifecycle
from apps.admin_dashboard.models import AdminAuditLog
from apps.notifications.models import Notification
from apps.songs.models import Song
from apps.songs.utils import songs_by_status, status_counts, transition_song

User = get_user_model()


class SongLifecycleTest(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.artist = User.objects.create_user(
            username='artist', email='artist@nada.test', password='testpass123',
            nickname='Singer', is_artist=True
        )
        self.song = Song.objects.create(
            owner=self.artist,
            title='First Light',
            nickname='Singer',
            genre='indie',
            audio_url='https://storage.test/v0/b/nada/o/songs%2Ffirst.mp3?alt=media&token=a',
            image_url='https://storage.test/v0/b/nada/o/covers%2Ffirst.png?alt=media&token=b',
        )

    def test_new_song_is_pending(self):
        self.assertEqual(self.song.status, lifecycle.PENDING)
        self.assertEqual(list(Song.objects.with_status(lifecycle.PENDING)), [self.song])
        self.assertEqual(self.song.allowed_actions, ['approve', 'reject'])

    def test_full_cycle(self):
        steps = [
            ('approve', lifecycle.APPROVED),
            ('pause', lifecycle.PAUSED),
            ('resume', lifecycle.APPROVED),
            ('delete', lifecycle.DELETED),
            ('restore', lifecycle.APPROVED),
        ]
        for action, expected in steps:
            self.assertEqual(transition_song(self.song, action, self.admin), expected)
            self.song.refresh_from_db()
            self.assertEqual(self.song.status, expected)
            self.assertEqual(list(Song.objects.with_status(expected)), [self.song])

        self.assertEqual(AdminAuditLog.objects.filter(action_type='song_transition').count(), len(steps))

    def test_invalid_transition(self):
        with self.assertRaises(lifecycle.InvalidSongTransition):
            transition_song(self.song, 'pause', self.admin)

        self.song.refresh_from_db()
        self.assertEqual(self.song.status, lifecycle.PENDING)
        self.assertFalse(AdminAuditLog.objects.exists())

    def test_owner_is_notified(self):
        with self.captureOnCommitCallbacks(execute=True):
            transition_song(self.song, 'approve', self.admin)

        notification = Notification.objects.get(recipient=self.artist)
        self.assertEqual(notification.notification_type, 'song')
        self.assertIn('First Light', notification.message)
        self.assertEqual(notification.target_id, str(self.song.id))

    @patch('apps.songs.utils.delete_stored_files')
    def test_purge_removes_row_and_blobs(self, delete_files):
        transition_song(self.song, 'reject', self.admin)

        with self.captureOnCommitCallbacks(execute=True):
            status = transition_song(self.song, 'purge', self.admin)

        self.assertEqual(status, lifecycle.PURGED)
        self.assertFalse(Song.objects.filter(id=self.song.id).exists())
        delete_files.assert_called_once_with([self.song.audio_url, self.song.image_url])

    def test_listing_filters(self):
        Song.objects.create(owner=self.artist, title='Second', nickname='Singer', genre='rock')

        self.assertEqual(songs_by_status(lifecycle.PENDING, genre='rock').count(), 1)
        self.assertEqual(songs_by_status(lifecycle.PENDING, search='light').get(), self.song)
        self.assertEqual(status_counts(), {'pending': 2, 'approved': 0, 'paused': 0, 'deleted': 0})


class SongViewsTest(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.artist = User.objects.create_user(
            username='artist', email='artist@nada.test', password='testpass123', nickname='Singer'
        )
        self.song = Song.objects.create(owner=self.artist, title='Night Drive', nickname='Singer')
        self.client.force_login(self.admin)

    def test_song_list(self):
        response = self.client.get(reverse('song_list'), {'status': 'pending'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Night Drive')
        self.assertEqual(response.context['counts']['pending'], 1)

    def test_song_action(self):
        response = self.client.post(reverse('song_action', args=[self.song.id, 'approve']))
        self.assertEqual(response.status_code, 302)
        self.song.refresh_from_db()
        self.assertEqual(self.song.status, lifecycle.APPROVED)

    def test_disallowed_action_is_reported(self):
        response = self.client.post(reverse('song_action', args=[self.song.id, 'restore']), follow=True)
        self.assertContains(response, 'Cannot restore a song that is pending')
        self.song.refresh_from_db()
        self.assertEqual(self.song.status, lifecycle.PENDING)
