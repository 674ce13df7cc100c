"""
Order services module.

All services are exported from this module to maintain backward compatibility.
"""
from .order_service import OrderService
from .refund_service import RefundService

__all__ = [
    'OrderService',
    'RefundService',
]
