from django.contrib import admin
from django.utils.html import format_html
from .models import Category, SubCategory, SubSubCategory, Brand, Product, Banner, CustomerReview


def image_preview(url, height=50):
    if url:
        return format_html('<img src="{}" style="max-height: {}px; object-fit: contain;" />', url, height)
    return '-'


class SubCategoryInline(admin.TabularInline):
    model = SubCategory
    extra = 0
    fields = ['name', 'priority', 'status']


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'priority', 'status', 'logo_preview', 'created_at']
    list_filter = ['status']
    search_fields = ['name']
    ordering = ['priority', 'id']
    inlines = [SubCategoryInline]

    def logo_preview(self, obj):
        return image_preview(obj.logo)
    logo_preview.short_description = 'Logo'


@admin.register(SubCategory)
class SubCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'priority', 'status']
    list_filter = ['status', 'category']
    search_fields = ['name', 'category__name']


@admin.register(SubSubCategory)
class SubSubCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'sub_category', 'category', 'priority', 'status']
    list_filter = ['status', 'category']
    search_fields = ['name']


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'logo_preview', 'total_products', 'total_orders', 'status']
    list_filter = ['status']
    search_fields = ['name']

    def logo_preview(self, obj):
        return image_preview(obj.logo)
    logo_preview.short_description = 'Logo'


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'title', 'sku', 'seller', 'category', 'unit_price', 'current_stock_qty',
        'product_status', 'is_featured', 'total_sold', 'thumbnail_preview'
    ]
    list_filter = ['product_status', 'is_featured', 'category', 'brand']
    search_fields = ['title', 'sku', 'seller__shop_name']
    readonly_fields = ['total_sold', 'total_sold_amount', 'created_at', 'updated_at', 'thumbnail_preview']
    list_select_related = ['seller', 'category']
    actions = ['approve_products']

    fieldsets = (
        ('Basic', {
            'fields': ('seller', 'title', 'description', 'thumbnail', 'thumbnail_preview', 'additional_images')
        }),
        ('General info', {
            'fields': ('category', 'sub_category', 'sub_sub_category', 'brand', 'product_type', 'unit', 'sku')
        }),
        ('Settings', {
            'fields': (
                'manufacturer', 'made_in', 'fssai_license_number', 'is_returnable',
                'is_cod_allowed', 'is_cancelable', 'total_allowed_quantity', 'product_status', 'is_featured'
            )
        }),
        ('Pricing', {
            'fields': (
                'unit_price', 'minimum_order_qty', 'current_stock_qty', 'discount_type',
                'discount_amount', 'tax_amount', 'tax_calculation', 'shipping_cost'
            )
        }),
        ('SEO', {
            'fields': ('seo',),
            'classes': ('collapse',)
        }),
        ('Sales', {
            'fields': ('total_sold', 'total_sold_amount', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def thumbnail_preview(self, obj):
        return image_preview(obj.thumbnail)
    thumbnail_preview.short_description = 'Thumbnail'

    def approve_products(self, request, queryset):
        updated = queryset.update(product_status=Product.STATUS_APPROVED)
        self.message_user(request, f'{updated} products approved.')
    approve_products.short_description = 'Approve selected products'


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ['banner_type', 'resource_type', 'banner_image_ratio', 'is_published', 'image_preview_cell']
    list_filter = ['banner_type', 'is_published']

    def image_preview_cell(self, obj):
        return image_preview(obj.image_url)
    image_preview_cell.short_description = 'Image'


@admin.register(CustomerReview)
class CustomerReviewAdmin(admin.ModelAdmin):
    list_display = ['review_id', 'product', 'customer', 'rating', 'status', 'created_at']
    list_filter = ['status', 'rating']
    search_fields = ['review_id', 'product__title']
