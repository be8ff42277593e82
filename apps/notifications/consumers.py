# apps/notifications/consumers.py

import json
from channels.generic.websocket import AsyncWebsocketConsumer
from channels.db import database_sync_to_async


class NotificationConsumer(AsyncWebsocketConsumer):
    """WebSocket consumer for real-time notifications"""

    async def connect(self):
        self.user = self.scope['user']

        if not self.user.is_authenticated:
            await self.close()
            return

        self.user_group_name = f'notifications_{self.user.id}'

        await self.channel_layer.group_add(
            self.user_group_name,
            self.channel_name
        )

        await self.accept()

        unread_count = await self.get_unread_count()
        await self.send(text_data=json.dumps({
            'type': 'connection',
            'unread_count': unread_count
        }))

    async def disconnect(self, close_code):
        if hasattr(self, 'user_group_name'):
            await self.channel_layer.group_discard(
                self.user_group_name,
                self.channel_name
            )

    async def receive(self, text_data):
        try:
            data = json.loads(text_data)
        except ValueError:
            return

        action = data.get('action')

        if action == 'mark_read':
            await self.mark_notification_read(data.get('notification_id'))
        elif action == 'mark_all_read':
            await self.mark_all_read()
        elif action == 'get_recent':
            notifications = await self.get_recent_notifications()
            await self.send(text_data=json.dumps({
                'type': 'recent_notifications',
                'notifications': notifications
            }))

    async def send_notification(self, event):
        """Handler for group_send messages of type send_notification"""
        await self.send(text_data=json.dumps({
            'type': 'notification',
            'notification': event['notification']
        }))

    @database_sync_to_async
    def get_unread_count(self):
        from .models import Notification
        return Notification.objects.filter(recipient=self.user, is_read=False).count()

    @database_sync_to_async
    def get_recent_notifications(self):
        from .models import Notification
        return [
            n.to_payload()
            for n in Notification.objects.filter(recipient=self.user)[:20]
        ]

    @database_sync_to_async
    def mark_notification_read(self, notification_id):
        from django.core.exceptions import ValidationError
        from .models import Notification
        try:
            notification = Notification.objects.filter(id=notification_id, recipient=self.user).first()
        except ValidationError:
            return
        if notification:
            notification.mark_as_read()

    @database_sync_to_async
    def mark_all_read(self):
        from django.utils import timezone
        from .models import Notification
        Notification.objects.filter(recipient=self.user, is_read=False).update(
            is_read=True, read_at=timezone.now()
        )
