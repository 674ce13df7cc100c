"""
Promotion services module.

All services are exported from this module to maintain backward compatibility.
"""
from .coupon_service import CouponService, parse_id_list
from .flash_deal_service import FlashDealService
from .deal_service import DealOfTheDayService

__all__ = [
    'CouponService',
    'FlashDealService',
    'DealOfTheDayService',
    'parse_id_list',
]
