from decimal import Decimal

from django.db import models


class Product(models.Model):
    """Seller-owned catalog item"""
    STATUS_APPROVED = 'Approved'
    STATUS_NOT_APPROVED = 'Not-Approved'
    STATUS_CHOICES = [
        (STATUS_APPROVED, 'Approved'),
        (STATUS_NOT_APPROVED, 'Not-Approved'),
    ]

    DISCOUNT_TYPE_CHOICES = [
        ('flat', 'Flat'),
        ('percentage', 'Percentage'),
    ]

    TAX_CALCULATION_CHOICES = [
        ('include', 'Include with product'),
        ('exclude', 'Exclude with product'),
    ]

    seller = models.ForeignKey('users.Seller', on_delete=models.CASCADE, related_name='products')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')

    # General info
    category = models.ForeignKey('products.Category', on_delete=models.PROTECT, related_name='products')
    sub_category = models.ForeignKey(
        'products.SubCategory', on_delete=models.SET_NULL, null=True, blank=True, related_name='products'
    )
    sub_sub_category = models.ForeignKey(
        'products.SubSubCategory', on_delete=models.SET_NULL, null=True, blank=True, related_name='products'
    )
    brand = models.ForeignKey(
        'products.Brand', on_delete=models.SET_NULL, null=True, blank=True, related_name='products'
    )
    product_type = models.CharField(max_length=50, blank=True, default='')
    unit = models.CharField(max_length=50, blank=True, default='')
    sku = models.CharField(max_length=100, unique=True, help_text="Stock keeping unit")

    # Settings
    manufacturer = models.CharField(max_length=200, blank=True, default='')
    made_in = models.CharField(max_length=100, blank=True, default='')
    fssai_license_number = models.CharField(max_length=50, blank=True, default='')
    is_returnable = models.BooleanField(default=False)
    is_cod_allowed = models.BooleanField(default=False)
    is_cancelable = models.BooleanField(default=False)
    total_allowed_quantity = models.IntegerField(default=0)
    product_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NOT_APPROVED)

    # Pricing
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    minimum_order_qty = models.IntegerField(default=1)
    current_stock_qty = models.IntegerField(default=0)
    discount_type = models.CharField(max_length=20, choices=DISCOUNT_TYPE_CHOICES, blank=True, default='')
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    tax_calculation = models.CharField(max_length=20, choices=TAX_CALCULATION_CHOICES, blank=True, default='')
    shipping_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))

    # Images
    thumbnail = models.URLField(max_length=500, blank=True, default='')
    additional_images = models.JSONField(default=list, blank=True, help_text="Additional image URLs")

    # SEO
    seo = models.JSONField(
        default=dict, blank=True,
        help_text="metaTitle, metaDescription, metaImage, indexing flags"
    )

    is_featured = models.BooleanField(default=False)

    # Sales counters maintained by order creation
    total_sold = models.IntegerField(default=0)
    total_sold_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['product_status']),
            models.Index(fields=['seller', 'created_at']),
            models.Index(fields=['is_featured']),
        ]

    def __str__(self):
        return f"{self.title} ({self.sku})"
