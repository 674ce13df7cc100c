"""
User services module.

All services are exported from this module to maintain backward compatibility.
"""
from .customer_service import CustomerService
from .seller_service import SellerService

__all__ = [
    'CustomerService',
    'SellerService',
]
