from django.contrib import admin
from .models import Order, OrderItem, Refund, RefundLog


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ['product', 'quantity', 'unit_price', 'tax', 'item_discount', 'total_price']
    readonly_fields = fields
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = [
        'order_id', 'customer', 'seller', 'total', 'status', 'payment_status',
        'payment_method', 'created_at'
    ]
    list_filter = ['status', 'payment_status', 'created_at']
    search_fields = ['order_id', 'customer__first_name', 'customer__phone_number', 'seller__shop_name']
    readonly_fields = ['order_id', 'total', 'verification_code', 'created_at', 'updated_at']
    list_select_related = ['customer', 'seller']
    inlines = [OrderItemInline]

    fieldsets = (
        ('Order', {
            'fields': ('order_id', 'total', 'status', 'date', 'verification_code')
        }),
        ('Parties', {
            'fields': ('customer', 'seller', 'customer_address')
        }),
        ('Payment', {
            'fields': ('payment_status', 'payment_method')
        }),
        ('Delivery', {
            'fields': ('delivery_man_name', 'delivery_man_contact', 'expected_delivery_date'),
            'classes': ('collapse',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


class RefundLogInline(admin.TabularInline):
    model = RefundLog
    extra = 0
    fields = ['date', 'actor_type', 'actor_name', 'status', 'note']
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Refund)
class RefundAdmin(admin.ModelAdmin):
    list_display = ['refund_id', 'order', 'seller', 'refundable_amount', 'status', 'requested_date']
    list_filter = ['status', 'requested_date']
    search_fields = ['refund_id', 'order__order_id']
    readonly_fields = ['refund_id', 'products', 'refundable_amount', 'customer_details', 'created_at', 'updated_at']
    inlines = [RefundLogInline]
