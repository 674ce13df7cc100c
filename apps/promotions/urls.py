from django.urls import path
from . import views

urlpatterns = [
    # Coupons
    path('coupons/<int:pk>/status/', views.CouponStatusView.as_view(), name='coupon-status'),
    path('coupons/<int:pk>/', views.CouponDetailView.as_view(), name='coupon-detail'),
    path('coupons/', views.CouponListCreateView.as_view(), name='coupon-list'),

    # Flash deals
    path(
        'flash-deals/<int:pk>/products/<int:product_id>/',
        views.FlashDealProductRemoveView.as_view(),
        name='flash-deal-product-remove'
    ),
    path('flash-deals/<int:pk>/products/', views.FlashDealProductsView.as_view(), name='flash-deal-products'),
    path('flash-deals/<int:pk>/publish/', views.FlashDealPublishView.as_view(), name='flash-deal-publish'),
    path('flash-deals/<int:pk>/', views.FlashDealDetailView.as_view(), name='flash-deal-detail'),
    path('flash-deals/', views.FlashDealListCreateView.as_view(), name='flash-deal-list'),

    # Deal of the day
    path('deals-of-the-day/<int:pk>/status/', views.DealOfTheDayStatusView.as_view(), name='deal-status'),
    path('deals-of-the-day/<int:pk>/', views.DealOfTheDayDetailView.as_view(), name='deal-detail'),
    path('deals-of-the-day/', views.DealOfTheDayListCreateView.as_view(), name='deal-list'),
]
