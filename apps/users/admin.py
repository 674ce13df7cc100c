from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, Customer, Seller, CustomerAddress


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Staff accounts"""
    list_display = ['username', 'email', 'phone', 'is_staff', 'created_at']
    list_filter = ['is_staff', 'is_superuser', 'is_active', 'created_at']
    search_fields = ['username', 'email', 'phone']
    ordering = ['-created_at']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Contact', {
            'fields': ('phone', 'avatar')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    readonly_fields = ['created_at', 'updated_at']


class CustomerAddressInline(admin.StackedInline):
    model = CustomerAddress
    extra = 0
    fields = ['billing_address', 'shipping_address']


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'phone_number', 'email', 'is_block', 'joined_date', 'logo_preview']
    list_filter = ['is_block', 'joined_date']
    search_fields = ['first_name', 'last_name', 'phone_number', 'email']
    readonly_fields = ['created_at', 'updated_at', 'logo_preview']
    inlines = [CustomerAddressInline]

    def logo_preview(self, obj):
        if obj and obj.customer_logo:
            return format_html('<img src="{}" style="max-height: 40px;" />', obj.customer_logo)
        return '-'
    logo_preview.short_description = 'Logo'


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ['shop_name', 'full_name', 'phone_number', 'email', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['shop_name', 'first_name', 'last_name', 'phone_number', 'email']
    readonly_fields = ['created_at', 'updated_at']
    exclude = ['password']
    actions = ['approve_sellers', 'block_sellers']

    def approve_sellers(self, request, queryset):
        updated = queryset.update(status=Seller.STATUS_APPROVED)
        self.message_user(request, f'{updated} sellers approved.')
    approve_sellers.short_description = 'Approve selected sellers'

    def block_sellers(self, request, queryset):
        updated = queryset.update(status=Seller.STATUS_BLOCKED)
        self.message_user(request, f'{updated} sellers blocked.')
    block_sellers.short_description = 'Block selected sellers'
