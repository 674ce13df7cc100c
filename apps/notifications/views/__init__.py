"""
Notification views module.

All views are exported from this module to maintain backward compatibility.
"""
from .notification_views import DeviceTokenView, NotificationListSendView, NotificationResendView

__all__ = [
    'DeviceTokenView',
    'NotificationListSendView',
    'NotificationResendView',
]
