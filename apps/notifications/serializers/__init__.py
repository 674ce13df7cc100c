"""
Notification serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .notification_serializers import DeviceTokenSerializer, NotificationSerializer

__all__ = [
    'DeviceTokenSerializer',
    'NotificationSerializer',
]
