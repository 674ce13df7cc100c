"""
User serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .customer_serializers import (
    CustomerSerializer, CustomerUpdateSerializer, CustomerBlockSerializer
)
from .seller_serializers import (
    SellerSerializer, SellerSummarySerializer, SellerCreateSerializer,
    SellerUpdateSerializer, SellerStatusSerializer
)
from .address_serializers import AddressBlockSerializer, CustomerAddressSerializer

__all__ = [
    'CustomerSerializer',
    'CustomerUpdateSerializer',
    'CustomerBlockSerializer',
    'SellerSerializer',
    'SellerSummarySerializer',
    'SellerCreateSerializer',
    'SellerUpdateSerializer',
    'SellerStatusSerializer',
    'AddressBlockSerializer',
    'CustomerAddressSerializer',
]
