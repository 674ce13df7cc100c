"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .order_serializers import (
    OrderItemInputSerializer, OrderSerializer, OrderItemSerializer,
    OrderStatusUpdateSerializer, OrderFilterSerializer, STATUS_VALUES, PAYMENT_STATUS_VALUES
)
from .refund_serializers import RefundSerializer, RefundLogSerializer

__all__ = [
    'OrderItemInputSerializer',
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderStatusUpdateSerializer',
    'OrderFilterSerializer',
    'STATUS_VALUES',
    'PAYMENT_STATUS_VALUES',
    'RefundSerializer',
    'RefundLogSerializer',
]
