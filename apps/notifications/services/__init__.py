"""
Notification services module.

All services are exported from this module to maintain backward compatibility.
"""
from .push_service import PushClient, PushError, PushResult, get_push_client
from .notification_service import DeviceTokenService, NotificationService

__all__ = [
    'PushClient',
    'PushError',
    'PushResult',
    'get_push_client',
    'DeviceTokenService',
    'NotificationService',
]
