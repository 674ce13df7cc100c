"""
Promotion serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .coupon_serializers import (
    CouponCustomerSerializer, CouponSerializer, CouponUpdateSerializer, CouponStatusSerializer
)
from .flash_deal_serializers import (
    FlashDealProductSerializer, FlashDealSerializer, FlashDealDetailSerializer,
    FlashDealProductsSerializer, FlashDealPublishSerializer
)
from .deal_serializers import DealOfTheDaySerializer, DealOfTheDayWriteSerializer, DealStatusSerializer

__all__ = [
    'CouponCustomerSerializer',
    'CouponSerializer',
    'CouponUpdateSerializer',
    'CouponStatusSerializer',
    'FlashDealProductSerializer',
    'FlashDealSerializer',
    'FlashDealDetailSerializer',
    'FlashDealProductsSerializer',
    'FlashDealPublishSerializer',
    'DealOfTheDaySerializer',
    'DealOfTheDayWriteSerializer',
    'DealStatusSerializer',
]
