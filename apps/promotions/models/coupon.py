import random
import string
from decimal import Decimal

from django.db import models


def generate_coupon_code():
    """Random 10 character lowercase base36 code"""
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=10))


class Coupon(models.Model):
    """
    Discount coupon issued by an admin or a seller.

    ``creator_id`` refers to an admin user or a seller depending on
    ``creator_type``.
    """
    TYPE_DISCOUNT_ON_PURCHASE = 'discountOnPurchase'
    TYPE_FREE_DELIVERY = 'freeDelivery'
    TYPE_FIRST_ORDER = 'firstOrder'
    COUPON_TYPE_CHOICES = [
        (TYPE_DISCOUNT_ON_PURCHASE, 'Discount on purchase'),
        (TYPE_FREE_DELIVERY, 'Free delivery'),
        (TYPE_FIRST_ORDER, 'First order'),
    ]

    CREATOR_ADMIN = 'admin'
    CREATOR_SELLER = 'seller'
    CREATOR_TYPE_CHOICES = [
        (CREATOR_ADMIN, 'Admin'),
        (CREATOR_SELLER, 'Seller'),
    ]

    CUSTOMER_ALL = 'all'
    CUSTOMER_SPECIFIC = 'specific'
    CUSTOMER_CHOICES = [
        (CUSTOMER_ALL, 'All customers'),
        (CUSTOMER_SPECIFIC, 'Specific customers'),
    ]

    DISCOUNT_AMOUNT = 'amount'
    DISCOUNT_PERCENTAGE = 'percentage'
    DISCOUNT_TYPE_CHOICES = [
        (DISCOUNT_AMOUNT, 'Amount'),
        (DISCOUNT_PERCENTAGE, 'Percentage'),
    ]

    coupon_type = models.CharField(max_length=30, choices=COUPON_TYPE_CHOICES)
    title = models.CharField(max_length=200)
    code = models.CharField(max_length=50, unique=True, default=generate_coupon_code)
    creator_type = models.CharField(max_length=10, choices=CREATOR_TYPE_CHOICES)
    creator_id = models.PositiveIntegerField()
    applicable_products = models.ManyToManyField('products.Product', blank=True, related_name='coupons')
    apply_to_all_products = models.BooleanField(default=True)
    customer = models.CharField(max_length=10, choices=CUSTOMER_CHOICES, default=CUSTOMER_ALL)
    specific_customers = models.ManyToManyField('users.Customer', blank=True, related_name='coupons')
    limit_per_user = models.PositiveIntegerField(default=1)
    discount_type = models.CharField(max_length=20, choices=DISCOUNT_TYPE_CHOICES)
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2)
    min_purchase = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    start_date = models.DateTimeField()
    expire_date = models.DateTimeField()
    apply_to_all_categories = models.BooleanField(default=True)
    category = models.ForeignKey(
        'products.Category', on_delete=models.SET_NULL, null=True, blank=True, related_name='coupons'
    )
    status = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'coupons'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['creator_type', 'creator_id']),
        ]

    def __str__(self):
        return f"{self.title} ({self.code})"
