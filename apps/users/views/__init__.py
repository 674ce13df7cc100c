"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .customer_views import CustomerListView, CustomerDetailView, CustomerBlockStatusView
from .seller_views import SellerListCreateView, SellerDetailView, SellerStatusView
from .address_views import CustomerAddressViewSet

__all__ = [
    'CustomerListView',
    'CustomerDetailView',
    'CustomerBlockStatusView',
    'SellerListCreateView',
    'SellerDetailView',
    'SellerStatusView',
    'CustomerAddressViewSet',
]
