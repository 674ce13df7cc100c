"""
Notification and device token views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import success_response, list_response, server_error, service_error_response
from ..serializers import DeviceTokenSerializer, NotificationSerializer
from ..services import DeviceTokenService, NotificationService

logger = logging.getLogger(__name__)


class DeviceTokenView(APIView):
    """Register a device token (idempotent) or list the registered tokens"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            tokens = DeviceTokenService.list_tokens()
            return list_response(tokens, DeviceTokenSerializer, request, 'Device tokens retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching device tokens: {e}")
            return server_error(e)

    def post(self, request):
        try:
            device_token, created = DeviceTokenService.save_token(request.data.get('token'))
            if not created:
                return success_response(DeviceTokenSerializer(device_token).data, 'Device token already exists.')
            return success_response(
                DeviceTokenSerializer(device_token).data, 'Device token saved successfully.', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error saving device token: {e}")
            return server_error(e)


class NotificationListSendView(APIView):
    """
    GET  - sent notifications, newest first
    POST - send to the stored device tokens plus ``recipientTokens``
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            notifications = NotificationService.list_notifications()
            return list_response(notifications, NotificationSerializer, request, 'Notifications retrieved successfully')
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            notification = NotificationService.send_notification(request.data, request.FILES.get('image'))
            return success_response(NotificationSerializer(notification).data, 'Notification sent successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error sending new notification: {e}")
            return server_error(e)


class NotificationResendView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        try:
            notification = NotificationService.get_notification(pk)
            notification = NotificationService.resend_notification(notification)
            return success_response(NotificationSerializer(notification).data, 'Notification resent successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error resending notification {pk}: {e}")
            return server_error(e)
