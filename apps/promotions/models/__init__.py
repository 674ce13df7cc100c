"""
Promotion models module.

All models are exported from this module to maintain backward compatibility.
"""
from .coupon import Coupon, generate_coupon_code
from .flash_deal import FlashDeal
from .deal_of_the_day import DealOfTheDay

__all__ = [
    'Coupon',
    'FlashDeal',
    'DealOfTheDay',
    'generate_coupon_code',
]
