# tests/test_accounts.py

from datetime import timedelta

from django.conf import settings
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from django.contrib.auth import get_user_model

from algorithms import suspension as rules
from apps.accounts.forms import ArtistLevelForm
from apps.accounts.models import LoginHistory
from apps.accounts.session import SESSION_KEY
from apps.accounts.utils import (
    AdminRoleError, filter_users, user_filter_counts,
    suspend_user, unsuspend_user, change_artist_level, set_admin_role
)
from apps.admin_dashboard.models import AdminAuditLog

User = get_user_model()


class ConsoleLoginTest(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin',
            email='admin@nada.test',
            password='testpass123',
            nickname='Operator',
            is_admin=True
        )
        self.member = User.objects.create_user(
            username='member',
            email='member@nada.test',
            password='testpass123',
            nickname='Listener'
        )

    def login(self, email, password):
        return self.client.post(
            reverse('console_login'),
            {'email': email, 'password': password},
            REMOTE_ADDR='10.0.0.7'
        )

    def test_admin_login_opens_session(self):
        response = self.login('admin@nada.test', 'testpass123')

        self.assertRedirects(response, reverse('admin_dashboard'), fetch_redirect_response=False)

        record = LoginHistory.objects.get(user=self.admin)
        self.assertTrue(record.is_open)
        self.assertEqual(record.ip_address, '10.0.0.7')

        data = self.client.session[SESSION_KEY]
        self.assertEqual(data['login_record_id'], record.id)
        self.assertEqual(data['ip_address'], '10.0.0.7')

        audit = AdminAuditLog.objects.get(action_type='console_login')
        self.assertEqual(audit.admin_user, self.admin)
        self.assertEqual(audit.ip_address, '10.0.0.7')

    def test_login_errors_do_not_reveal_reason(self):
        wrong_password = self.login('admin@nada.test', 'nope')
        unknown_email = self.login('ghost@nada.test', 'testpass123')
        not_admin = self.login('member@nada.test', 'testpass123')

        for response in (wrong_password, unknown_email, not_admin):
            self.assertEqual(response.status_code, 200)
            self.assertContains(response, 'Invalid credentials or insufficient permissions.')

        self.assertFalse(LoginHistory.objects.exists())
        self.assertNotIn('_auth_user_id', self.client.session)

    def test_superuser_can_sign_in_without_admin_flag(self):
        User.objects.create_superuser(username='root', email='root@nada.test', password='testpass123')
        response = self.login('root@nada.test', 'testpass123')
        self.assertEqual(response.status_code, 302)

    def test_logout_closes_login_record(self):
        self.login('admin@nada.test', 'testpass123')
        response = self.client.post(reverse('console_logout'))

        self.assertRedirects(response, reverse('console_login'), fetch_redirect_response=False)
        record = LoginHistory.objects.get(user=self.admin)
        self.assertFalse(record.is_open)

    def test_console_requires_admin(self):
        response = self.client.get(reverse('user_list'))
        self.assertRedirects(response, reverse('console_login'), fetch_redirect_response=False)

        self.client.force_login(self.member)
        response = self.client.get(reverse('user_list'))
        self.assertEqual(response.status_code, 403)


class SuspensionTest(TestCase):
    def setUp(self):
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.user = User.objects.create_user(
            username='target', email='target@nada.test', password='testpass123', nickname='Target'
        )

    def test_timed_suspension(self):
        before = timezone.now()
        suspend_user(self.user, '3d', self.admin)
        self.user.refresh_from_db()

        self.assertFalse(self.user.is_permanently_banned)
        self.assertGreaterEqual(self.user.suspended_until, before + timedelta(days=3))
        self.assertLess(self.user.suspended_until, timezone.now() + timedelta(days=3, seconds=5))
        self.assertEqual(self.user.suspension_status, rules.STATUS_SUSPENDED)
        self.assertEqual(self.user.suspension_count, 1)
        self.assertTrue(AdminAuditLog.objects.filter(action_type='user_suspend', target_user=self.user).exists())

    def test_suspension_lapses_without_cleanup(self):
        suspend_user(self.user, '1d', self.admin)
        self.user.refresh_from_db()

        later = timezone.now() + timedelta(days=2)
        self.assertEqual(self.user.get_suspension_status(later), rules.STATUS_EXPIRED)
        self.assertIsNotNone(self.user.suspended_until)

    def test_permanent_then_unsuspend(self):
        suspend_user(self.user, 'permanent', self.admin)
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_permanently_banned)
        self.assertIsNone(self.user.suspended_until)
        self.assertEqual(self.user.suspension_status, rules.STATUS_BANNED)

        unsuspend_user(self.user, self.admin)
        self.user.refresh_from_db()
        self.assertFalse(self.user.is_permanently_banned)
        self.assertEqual(self.user.suspension_status, rules.STATUS_NORMAL)

    def test_unknown_duration_rejected(self):
        with self.assertRaises(ValueError):
            suspend_user(self.user, '7d', self.admin)
        self.user.refresh_from_db()
        self.assertEqual(self.user.suspension_count, 0)

    def test_suspended_filter_keeps_lapsed_until_lifted(self):
        lapsed = User.objects.create_user(
            username='lapsed', email='lapsed@nada.test', password='testpass123',
            suspended_until=timezone.now() - timedelta(hours=1)
        )
        banned = User.objects.create_user(
            username='banned', email='banned@nada.test', password='testpass123',
            is_permanently_banned=True
        )
        suspend_user(self.user, '5d', self.admin)

        normal = User.objects.create_user(
            username='normal', email='normal@nada.test', password='testpass123'
        )

        suspended = set(filter_users('suspended'))
        self.assertEqual(suspended, {self.user, banned, lapsed})
        self.assertNotIn(normal, suspended)
        self.assertEqual(lapsed.suspension_status, rules.STATUS_EXPIRED)
        self.assertEqual(user_filter_counts()['suspended'], 3)

        unsuspend_user(lapsed, self.admin)
        self.assertNotIn(lapsed, filter_users('suspended'))

    def test_suspend_view_uses_user_durations(self):
        self.client.force_login(self.admin)
        url = reverse('user_suspend', args=[self.user.id])

        self.client.post(url, {'duration': '2d'})
        self.user.refresh_from_db()
        self.assertIsNone(self.user.suspended_until)

        self.client.post(url, {'duration': '5d'})
        self.user.refresh_from_db()
        self.assertEqual(self.user.suspension_status, rules.STATUS_SUSPENDED)


class UserManagementTest(TestCase):
    def setUp(self):
        self.superuser = User.objects.create_superuser(
            username='root', email='root@nada.test', password='testpass123'
        )
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.artist = User.objects.create_user(
            username='artist', email='artist@nada.test', password='testpass123',
            nickname='Singer', is_artist=True
        )

    def test_filters_and_search(self):
        self.assertEqual(list(filter_users('artist')), [self.artist])
        self.assertNotIn(self.artist, filter_users('user'))
        self.assertEqual(list(filter_users('all', search='sing')), [self.artist])
        self.assertEqual(list(filter_users('artist', level='pro')), [])

    def test_artist_levels_follow_settings(self):
        self.assertEqual(list(User.ARTIST_LEVELS), list(settings.NADA_SETTINGS['ARTIST_LEVELS']))
        self.assertEqual(
            [value for value, _ in ArtistLevelForm().fields['level'].choices],
            [value for value, _ in settings.NADA_SETTINGS['ARTIST_LEVELS']]
        )

    def test_change_artist_level(self):
        change_artist_level(self.artist, 'pro', self.admin)
        self.artist.refresh_from_db()
        self.assertEqual(self.artist.artist_level, 'pro')

        with self.assertRaises(ValueError):
            change_artist_level(self.admin, 'pro', self.admin)

    def test_only_superuser_changes_admin_role(self):
        with self.assertRaises(AdminRoleError):
            set_admin_role(self.artist, True, self.admin)

        set_admin_role(self.artist, True, self.superuser)
        self.artist.refresh_from_db()
        self.assertTrue(self.artist.is_admin)
        self.assertTrue(AdminAuditLog.objects.filter(action_type='admin_grant').exists())

        set_admin_role(self.artist, False, self.superuser)
        self.artist.refresh_from_db()
        self.assertFalse(self.artist.is_admin)

    def test_cannot_revoke_own_role(self):
        with self.assertRaises(AdminRoleError):
            set_admin_role(self.superuser, False, self.superuser)

    def test_toggle_admin_view_forbidden_for_admin(self):
        self.client.force_login(self.admin)
        response = self.client.post(reverse('user_toggle_admin', args=[self.artist.id]))
        self.assertEqual(response.status_code, 403)

        response = self.client.get(reverse('user_list'))
        self.assertEqual(list(response.context['messages']), [])
        self.artist.refresh_from_db()
        self.assertFalse(self.artist.is_admin)

    def test_user_list_renders(self):
        self.client.force_login(self.admin)
        response = self.client.get(reverse('user_list'), {'filter': 'artist'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Singer')
        self.assertEqual(response.context['counts']['artist'], 1)
