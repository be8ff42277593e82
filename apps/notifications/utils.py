# apps/notifications/utils.py

import logging

from channels.layers import get_channel_layer
from asgiref.sync import async_to_sync
from django.db import transaction

from .models import Notification

logger = logging.getLogger('nada')


def send_notification(recipient, message, notification_type='system', target_id=''):
    """
    Create a notification and push it to the recipient's socket group

    Delivery is fire-and-forget: a failure is logged and None is returned,
    the caller's own work is never undone.
    """
    try:
        notification = Notification.objects.create(
            recipient=recipient,
            notification_type=notification_type,
            message=message,
            target_id=str(target_id or '')
        )
    except Exception:
        logger.warning(f"Could not store notification for {recipient.pk}", exc_info=True)
        return None

    channel_layer = get_channel_layer()
    if channel_layer is not None:
        try:
            async_to_sync(channel_layer.group_send)(
                f'notifications_{recipient.id}',
                {
                    'type': 'send_notification',
                    'notification': notification.to_payload()
                }
            )
        except Exception:
            logger.warning(f"Could not push notification {notification.id}", exc_info=True)

    return notification


def notify_on_commit(recipient, message, notification_type='system', target_id=''):
    """Send once the surrounding transaction commits (immediately outside one)"""
    transaction.on_commit(
        lambda: send_notification(recipient, message, notification_type, target_id)
    )
