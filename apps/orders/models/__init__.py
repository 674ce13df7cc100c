"""
Order models module.

All models are exported from this module to maintain backward compatibility.
"""
from .order import Order, generate_order_id
from .order_item import OrderItem
from .refund import Refund, RefundLog, generate_refund_id

__all__ = [
    'Order',
    'OrderItem',
    'Refund',
    'RefundLog',
    'generate_order_id',
    'generate_refund_id',
]
