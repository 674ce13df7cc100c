"""
Notification service: device token registry and push fan-out.
"""
import json
import logging

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image
from ..models import DeviceToken, Notification
from .push_service import PushError, get_push_client

logger = logging.getLogger(__name__)

NOTIFICATION_IMAGE_FOLDER = 'notifications'


class DeviceTokenService:

    @staticmethod
    def save_token(token):
        """Returns ``(device_token, created)``"""
        if not token:
            raise ServiceError('Device token is required.')
        return DeviceToken.objects.get_or_create(token=token)

    @staticmethod
    def list_tokens():
        return DeviceToken.objects.order_by('-created_at', '-id')


class NotificationService:
    """Service class for push notifications"""

    @staticmethod
    def parse_recipient_tokens(data):
        """
        ``recipientTokens`` may be a list or a JSON-encoded list; every entry
        must be a string.
        """
        if hasattr(data, 'getlist'):
            values = data.getlist('recipientTokens')
            raw = values[0] if len(values) == 1 else values
        else:
            raw = data.get('recipientTokens')
        if not raw:
            return []

        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                raise ServiceError('Invalid recipient tokens format.')

        if not isinstance(raw, list) or not all(isinstance(token, str) for token in raw):
            raise ServiceError('Recipient tokens must be an array of strings.')
        return raw

    @staticmethod
    def _push(notification: Notification):
        try:
            return get_push_client().send_multicast(
                notification.recipient_tokens,
                notification.title,
                notification.description,
                notification.image_url or None,
            )
        except PushError as e:
            logger.error(f"Error sending notification {notification.id}: {e}")
            notification.status = Notification.STATUS_FAILED
            notification.save(update_fields=['status', 'updated_at'])
            raise ServiceError(f"Failed to send notification: {e}", status_code=500)

    @staticmethod
    def send_notification(data, image_file=None) -> Notification:
        title = data.get('title')
        description = data.get('description')
        if not title or not description:
            raise ServiceError('Title and description are required.')

        requested = NotificationService.parse_recipient_tokens(data)
        stored = list(DeviceToken.objects.order_by('id').values_list('token', flat=True))
        tokens = list(dict.fromkeys(stored + requested))
        if not tokens:
            raise ServiceError('No valid recipient tokens found.')

        image_url = ''
        if image_file is not None:
            image_url = upload_image(image_file, NOTIFICATION_IMAGE_FOLDER).get('secure_url', '')

        notification = Notification.objects.create(
            title=title,
            description=description,
            image_url=image_url,
            recipient_tokens=tokens,
        )

        result = NotificationService._push(notification)
        notification.notification_count = result.success_count
        notification.failure_count = result.failure_count
        notification.save(update_fields=['notification_count', 'failure_count', 'updated_at'])
        return notification

    @staticmethod
    def get_notification(notification_id) -> Notification:
        try:
            return Notification.objects.get(pk=notification_id)
        except (Notification.DoesNotExist, ValueError):
            raise NotFoundError('Notification not found.')

    @staticmethod
    def list_notifications():
        return Notification.objects.order_by('-created_at', '-id')

    @staticmethod
    def resend_notification(notification: Notification) -> Notification:
        result = NotificationService._push(notification)
        notification.notification_count += result.success_count
        notification.failure_count += result.failure_count
        notification.status = Notification.STATUS_SENT
        notification.save(update_fields=['notification_count', 'failure_count', 'status', 'updated_at'])
        return notification
