"""
Order views module.

All views are exported from this module to maintain backward compatibility.
"""
from .order_views import (
    OrderListCreateView, PendingOrderListView, ConfirmedOrderListView, PackagingOrderListView,
    CanceledOrderListView, ReturnedOrderListView, DeliveredOrderListView,
    OrderDetailView, OrderStatusUpdateView, CustomerOrderListView, StoreListView,
    OrderExportView, PendingOrderExportView, ConfirmedOrderExportView, PackagingOrderExportView,
    CanceledOrderExportView, ReturnedOrderExportView, DeliveredOrderExportView
)
from .refund_views import RefundListCreateView, RefundDetailView, RefundExportView, RefundDecisionView

__all__ = [
    'OrderListCreateView',
    'PendingOrderListView',
    'ConfirmedOrderListView',
    'PackagingOrderListView',
    'CanceledOrderListView',
    'ReturnedOrderListView',
    'DeliveredOrderListView',
    'OrderDetailView',
    'OrderStatusUpdateView',
    'CustomerOrderListView',
    'StoreListView',
    'OrderExportView',
    'PendingOrderExportView',
    'ConfirmedOrderExportView',
    'PackagingOrderExportView',
    'CanceledOrderExportView',
    'ReturnedOrderExportView',
    'DeliveredOrderExportView',
    'RefundListCreateView',
    'RefundDetailView',
    'RefundExportView',
    'RefundDecisionView',
]
