"""
Notification models module.

All models are exported from this module to maintain backward compatibility.
"""
from .device_token import DeviceToken
from .notification import Notification

__all__ = [
    'DeviceToken',
    'Notification',
]
