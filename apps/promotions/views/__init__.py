"""
Promotion views module.

All views are exported from this module to maintain backward compatibility.
"""
from .coupon_views import CouponListCreateView, CouponDetailView, CouponStatusView
from .flash_deal_views import (
    FlashDealListCreateView, FlashDealDetailView, FlashDealPublishView,
    FlashDealProductsView, FlashDealProductRemoveView
)
from .deal_views import DealOfTheDayListCreateView, DealOfTheDayDetailView, DealOfTheDayStatusView

__all__ = [
    'CouponListCreateView',
    'CouponDetailView',
    'CouponStatusView',
    'FlashDealListCreateView',
    'FlashDealDetailView',
    'FlashDealPublishView',
    'FlashDealProductsView',
    'FlashDealProductRemoveView',
    'DealOfTheDayListCreateView',
    'DealOfTheDayDetailView',
    'DealOfTheDayStatusView',
]
