# tests/test_reports.py

from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model

from algorithms import song_lifecycle as lifecycle
from algorithms import suspension as rules
from apps.admin_dashboard.models import AdminAuditLog
from apps.notifications.models import Notification
from apps.posts.models import Post, Comment
from apps.reports.models import Report, GuiltyReport
from apps.reports.utils import (
    ReportAlreadyProcessed, resolve_target, mark_innocent, mark_guilty,
    open_report_counts, guilty_counts, delete_guilty_record, ban_user_permanently
)
from apps.songs.models import Song

User = get_user_model()


class ReportTestCase(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.reporter = User.objects.create_user(
            username='reporter', email='reporter@nada.test', password='testpass123', nickname='Watcher'
        )
        self.offender = User.objects.create_user(
            username='offender', email='offender@nada.test', password='testpass123', nickname='Troll'
        )

    def report(self, report_type, target_id, **extra):
        return Report.objects.create(
            report_type=report_type,
            target_id=str(target_id),
            reporter=self.reporter,
            reporter_nickname='Watcher',
            reported_user=self.offender,
            reported_user_nickname='Troll',
            reason='Spam',
            **extra
        )


class ResolveTargetTest(ReportTestCase):
    def setUp(self):
        super().setUp()
        self.song = Song.objects.create(owner=self.offender, title='Loud', nickname='Troll')
        self.post = Post.objects.create(author=self.offender, content='hello')
        self.song_comment = Comment.objects.create(author=self.offender, song=self.song, content='first')
        self.reply = Comment.objects.create(
            author=self.offender, song=self.song, parent=self.song_comment, content='reply'
        )

    def test_song_uses_song_id(self):
        report = self.report('song', 'ignored', song_id=str(self.song.id))
        self.assertEqual(resolve_target(report), self.song)

    def test_post_on_other_board_not_found(self):
        report = self.report('post', self.post.id, board_owner_id=str(self.reporter.id))
        self.assertIsNone(resolve_target(report))
        self.assertEqual(resolve_target(self.report('post', self.post.id)), self.post)

    def test_reply_needs_matching_parent(self):
        report = self.report(
            'comment', self.reply.id,
            song_id=str(self.song.id), parent_comment_id=str(self.song_comment.id)
        )
        self.assertEqual(resolve_target(report), self.reply)

        wrong_parent = self.report(
            'comment', self.reply.id,
            song_id=str(self.song.id), parent_comment_id=str(self.reply.id)
        )
        self.assertIsNone(resolve_target(wrong_parent))

    def test_comment_without_container(self):
        self.assertIsNone(resolve_target(self.report('comment', self.reply.id)))

    def test_malformed_target_id(self):
        self.assertIsNone(resolve_target(self.report('post', 'not-a-uuid')))


class VerdictTest(ReportTestCase):
    def setUp(self):
        super().setUp()
        self.post = Post.objects.create(
            author=self.offender, content='buy followers', image_url='https://cdn.test/p.png'
        )

    def test_innocent_only_drops_report(self):
        report = self.report('post', self.post.id)
        mark_innocent(report.id, self.admin)

        self.assertFalse(Report.objects.exists())
        self.assertTrue(Post.objects.filter(id=self.post.id).exists())
        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_status, rules.STATUS_NORMAL)
        self.assertTrue(AdminAuditLog.objects.filter(action_type='report_innocent').exists())

    def test_guilty_post(self):
        report = self.report('post', self.post.id)

        with self.captureOnCommitCallbacks(execute=True):
            guilty = mark_guilty(report.id, '3d', self.admin)

        self.assertEqual(guilty.id, report.id)
        self.assertEqual(guilty.content_snapshot, 'buy followers')
        self.assertEqual(guilty.image_snapshot, 'https://cdn.test/p.png')
        self.assertEqual(guilty.reason, 'Spam')
        self.assertEqual(guilty.reported_user, self.offender)
        self.assertEqual(guilty.adjudicated_by, self.admin)
        self.assertEqual(guilty.suspension, '3d')

        self.assertFalse(Report.objects.exists())
        self.assertFalse(Post.objects.filter(id=self.post.id).exists())

        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_status, rules.STATUS_SUSPENDED)
        self.assertEqual(self.offender.suspension_count, 1)

        notification = Notification.objects.get(recipient=self.offender)
        self.assertEqual(notification.notification_type, 'moderation')

    def test_guilty_permanent(self):
        report = self.report('post', self.post.id)
        mark_guilty(report.id, 'permanent', self.admin)

        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_status, rules.STATUS_BANNED)

    def test_report_processed_once(self):
        report = self.report('post', self.post.id)
        mark_guilty(report.id, '1m', self.admin)

        with self.assertRaises(ReportAlreadyProcessed):
            mark_guilty(report.id, '1d', self.admin)
        with self.assertRaises(ReportAlreadyProcessed):
            mark_innocent(report.id, self.admin)

        self.assertEqual(GuiltyReport.objects.count(), 1)
        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_count, 1)

    def test_unknown_duration_leaves_report_open(self):
        report = self.report('post', self.post.id)
        with self.assertRaises(ValueError):
            mark_guilty(report.id, 'forever', self.admin)
        self.assertTrue(Report.objects.filter(id=report.id).exists())

    def test_content_already_gone(self):
        report = self.report('post', self.post.id)
        self.post.delete()

        guilty = mark_guilty(report.id, '1d', self.admin)

        self.assertEqual(guilty.content_snapshot, '')
        audit = AdminAuditLog.objects.get(action_type='report_guilty')
        self.assertFalse(audit.metadata['content_removed'])

    def test_existing_snapshot_is_kept(self):
        report = self.report('post', self.post.id, content_snapshot='as reported')
        guilty = mark_guilty(report.id, '1d', self.admin)
        self.assertEqual(guilty.content_snapshot, 'as reported')

    def test_guilty_song_is_soft_deleted(self):
        song = Song.objects.create(
            owner=self.offender, title='Stolen Beat', nickname='Troll',
            is_pending=False, is_visible=True
        )
        report = self.report('song', song.id, song_id=str(song.id))

        guilty = mark_guilty(report.id, '2d', self.admin)

        song.refresh_from_db()
        self.assertEqual(song.status, lifecycle.DELETED)
        self.assertEqual(guilty.content_snapshot, 'Stolen Beat')
        self.assertEqual(guilty.nickname_snapshot, 'Troll')

    def test_guilty_comment(self):
        comment = Comment.objects.create(author=self.offender, post=self.post, nickname='Troll', content='rude')
        report = self.report('comment', comment.id, post_id=str(self.post.id))

        guilty = mark_guilty(report.id, '1d', self.admin)

        self.assertFalse(Comment.objects.filter(id=comment.id).exists())
        self.assertTrue(Post.objects.filter(id=self.post.id).exists())
        self.assertEqual(guilty.nickname_snapshot, 'Troll')


class GuiltySetTest(ReportTestCase):
    def setUp(self):
        super().setUp()
        for _ in range(2):
            post = Post.objects.create(author=self.offender, content='spam')
            mark_guilty(self.report('post', post.id).id, '1d', self.admin)

    def test_counts(self):
        self.assertEqual(guilty_counts(), {self.offender.id: 2})
        self.assertEqual(open_report_counts(), {'post': 0, 'comment': 0, 'song': 0})

    def test_delete_record(self):
        record = GuiltyReport.objects.first()
        self.assertTrue(delete_guilty_record(record.id, self.admin))
        self.assertFalse(delete_guilty_record(record.id, self.admin))
        self.assertEqual(GuiltyReport.objects.count(), 1)

    def test_escalate_to_permanent(self):
        ban_user_permanently(self.offender, self.admin)
        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_status, rules.STATUS_BANNED)


class ReportViewsTest(ReportTestCase):
    def setUp(self):
        super().setUp()
        self.client.force_login(self.admin)
        self.post = Post.objects.create(author=self.offender, content='visible content')

    def test_report_list_shows_live_content(self):
        self.report('post', self.post.id)
        response = self.client.get(reverse('report_list'), {'type': 'post'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['counts']['post'], 1)
        self.assertContains(response, 'visible content')

    def test_guilty_view(self):
        report = self.report('post', self.post.id)
        response = self.client.post(reverse('report_guilty', args=[report.id]), {'duration': '1m'})

        self.assertRedirects(response, reverse('report_list'), fetch_redirect_response=False)
        self.assertTrue(GuiltyReport.objects.filter(id=report.id).exists())

    def test_double_verdict_is_a_warning(self):
        report = self.report('post', self.post.id)
        self.client.post(reverse('report_innocent', args=[report.id]))
        response = self.client.post(reverse('report_innocent', args=[report.id]), follow=True)
        self.assertContains(response, 'already processed')

    def test_guilty_user_filter(self):
        mark_guilty(self.report('post', self.post.id).id, '3d', self.admin)

        response = self.client.get(reverse('guilty_list'), {'filter': 'user'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['rows'][0], (self.offender, 1))

        self.client.post(reverse('guilty_unban', args=[self.offender.id]))
        self.offender.refresh_from_db()
        self.assertEqual(self.offender.suspension_status, rules.STATUS_NORMAL)

    @patch('apps.reports.views.ban_user_permanently', side_effect=DatabaseError)
    @patch('apps.reports.views.unsuspend_user', side_effect=DatabaseError)
    def test_guilty_user_actions_report_database_errors(self, unsuspend, ban):
        for name in ('guilty_unban', 'guilty_ban_permanently'):
            with self.assertLogs('nada', level='ERROR'):
                response = self.client.post(reverse(name, args=[self.offender.id]), follow=True)

            self.assertEqual(response.status_code, 200)
            self.assertContains(response, 'Something went wrong. Please try again.')
            self.assertNotContains(response, 'permanently banned.')

        unsuspend.assert_called_once()
        ban.assert_called_once()
        self.offender.refresh_from_db()
        self.assertFalse(self.offender.is_permanently_banned)
