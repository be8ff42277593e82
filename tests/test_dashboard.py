# tests/test_dashboard.py

from unittest.mock import AsyncMock, patch

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model

from apps.admin_dashboard.context_processors import get_console_counters
from apps.admin_dashboard.models import AdminAuditLog
from apps.admin_dashboard.utils import record_audit, recent_activity, activity_since
from apps.contact.models import ContactMessage
from apps.notifications.models import Notification
from apps.notifications.utils import send_notification
from apps.reports.models import Report
from apps.songs.models import Song

User = get_user_model()


class DashboardTest(TestCase):
    def setUp(self):
        cache.clear()
        self.admin = User.objects.create_user(
            username='admin', email='admin@nada.test', password='testpass123', is_admin=True
        )
        self.user = User.objects.create_user(
            username='member', email='member@nada.test', password='testpass123', nickname='Member'
        )

    def test_counters(self):
        Report.objects.create(report_type='post', target_id='x', reason='Spam')
        Song.objects.create(owner=self.user, title='Pending one')
        ContactMessage.objects.create(message='hi')

        counters = get_console_counters()
        self.assertEqual(counters['pending_reports'], 1)
        self.assertEqual(counters['pending_songs'], 1)
        self.assertEqual(counters['pending_applications'], 0)
        self.assertEqual(counters['open_contact_messages'], 1)

    def test_record_audit(self):
        entry = record_audit(self.admin, 'user_suspend', 'Suspended Member', target_user=self.user, target=self.user)

        self.assertEqual(entry.target_object_type, 'user')
        self.assertEqual(entry.target_object_id, str(self.user.id))
        self.assertEqual(list(recent_activity()), [entry])
        self.assertEqual(activity_since(7), 1)

    def test_dashboard_and_audit_log_pages(self):
        self.client.force_login(self.admin)

        response = self.client.get(reverse('admin_dashboard'))
        self.assertEqual(response.status_code, 200)
        self.assertIn('counters', response.context)

        response = self.client.get(reverse('audit_logs'))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(AdminAuditLog.objects.filter(action_type='console_login').exists())


class NotificationTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='member', email='member@nada.test', password='testpass123'
        )

    def test_send_notification(self):
        notification = send_notification(self.user, 'Hello', 'system', 'abc')

        self.assertEqual(notification.recipient, self.user)
        self.assertEqual(notification.to_payload()['message'], 'Hello')
        self.assertFalse(notification.is_read)

        notification.mark_as_read()
        self.assertTrue(Notification.objects.get(pk=notification.pk).is_read)

    @patch('apps.notifications.utils.get_channel_layer')
    def test_push_failure_is_not_raised(self, get_layer):
        get_layer.return_value.group_send = AsyncMock(side_effect=RuntimeError('layer down'))

        notification = send_notification(self.user, 'Hello')

        self.assertIsNotNone(notification)
        self.assertEqual(Notification.objects.count(), 1)
