from django.contrib import admin
from .models import Coupon, FlashDeal, DealOfTheDay


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ['title', 'code', 'coupon_type', 'creator_type', 'discount_type',
                    'discount_amount', 'start_date', 'expire_date', 'status']
    list_filter = ['coupon_type', 'creator_type', 'discount_type', 'status']
    search_fields = ['title', 'code']
    filter_horizontal = ['applicable_products', 'specific_customers']


@admin.register(FlashDeal)
class FlashDealAdmin(admin.ModelAdmin):
    list_display = ['title', 'start_date', 'end_date', 'status', 'active_products', 'is_published']
    list_filter = ['status', 'is_published']
    search_fields = ['title']
    filter_horizontal = ['products']
    actions = ['refresh_statuses']

    @admin.action(description='Recompute Active/Expired status')
    def refresh_statuses(self, request, queryset):
        for deal in queryset:
            deal.refresh_status()
            deal.save(update_fields=['status', 'updated_at'])


@admin.register(DealOfTheDay)
class DealOfTheDayAdmin(admin.ModelAdmin):
    list_display = ['title', 'product', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['title']
    raw_id_fields = ['product']
