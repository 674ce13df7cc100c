from django.urls import path
from . import views

urlpatterns = [
    # Refunds
    path('refunds/export/', views.RefundExportView.as_view(), name='refund-export'),
    path('refunds/<int:pk>/decision/', views.RefundDecisionView.as_view(), name='refund-decision'),
    path('refunds/<int:pk>/', views.RefundDetailView.as_view(), name='refund-detail'),
    path('refunds/', views.RefundListCreateView.as_view(), name='refund-list'),

    # Stores with orders
    path('store/', views.StoreListView.as_view(), name='order-stores'),

    # Exports
    path('export/', views.OrderExportView.as_view(), name='order-export'),
    path('pending_export/', views.PendingOrderExportView.as_view(), name='order-pending-export'),
    path('confirmed_export/', views.ConfirmedOrderExportView.as_view(), name='order-confirmed-export'),
    path('packaging_export/', views.PackagingOrderExportView.as_view(), name='order-packaging-export'),
    path('canceled_export/', views.CanceledOrderExportView.as_view(), name='order-canceled-export'),
    path('returned_export/', views.ReturnedOrderExportView.as_view(), name='order-returned-export'),
    path('delivered_export/', views.DeliveredOrderExportView.as_view(), name='order-delivered-export'),

    # Status listings
    path('pending/', views.PendingOrderListView.as_view(), name='order-pending'),
    path('confirmed/', views.ConfirmedOrderListView.as_view(), name='order-confirmed'),
    path('packaging/', views.PackagingOrderListView.as_view(), name='order-packaging'),
    path('canceled/', views.CanceledOrderListView.as_view(), name='order-canceled'),
    path('returned/', views.ReturnedOrderListView.as_view(), name='order-returned'),
    path('delivered/', views.DeliveredOrderListView.as_view(), name='order-delivered'),

    path('customer/<int:customer_id>/', views.CustomerOrderListView.as_view(), name='order-by-customer'),
    path('<int:pk>/status/', views.OrderStatusUpdateView.as_view(), name='order-status'),
    path('<int:pk>/', views.OrderDetailView.as_view(), name='order-detail'),
    path('', views.OrderListCreateView.as_view(), name='order-list'),
]
