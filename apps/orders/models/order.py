import random
import string
import time
from decimal import Decimal

from django.db import models
from django.utils import timezone


def generate_order_id():
    """``ORD-<epoch milliseconds>-<0..9999>``"""
    return f"ORD-{int(time.time() * 1000)}-{random.randint(0, 9999)}"


def generate_verification_code():
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))


class Order(models.Model):
    """Customer order placed with a single seller"""
    STATUS_PENDING = 'Pending'
    STATUS_CONFIRMED = 'Confirmed'
    STATUS_PACKAGING = 'Packaging'
    STATUS_ONGOING = 'Ongoing'
    STATUS_DELIVERED = 'Delivered'
    STATUS_CANCELED = 'Canceled'
    STATUS_RETURNED = 'Returned'
    STATUS_FAILED = 'Failed'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_PACKAGING, 'Packaging'),
        (STATUS_ONGOING, 'Ongoing'),
        (STATUS_DELIVERED, 'Delivered'),
        (STATUS_CANCELED, 'Canceled'),
        (STATUS_RETURNED, 'Returned'),
        (STATUS_FAILED, 'Failed'),
    ]

    PAYMENT_PAID = 'Paid'
    PAYMENT_PENDING = 'Pending'
    PAYMENT_FAILED = 'Failed'
    PAYMENT_REFUNDED = 'Refunded'
    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PAID, 'Paid'),
        (PAYMENT_PENDING, 'Pending'),
        (PAYMENT_FAILED, 'Failed'),
        (PAYMENT_REFUNDED, 'Refunded'),
    ]

    order_id = models.CharField(max_length=40, unique=True, default=generate_order_id)
    total = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    date = models.DateTimeField(default=timezone.now, help_text="Order date")

    customer = models.ForeignKey('users.Customer', on_delete=models.CASCADE, related_name='orders')
    seller = models.ForeignKey('users.Seller', on_delete=models.CASCADE, related_name='orders')
    customer_address = models.ForeignKey(
        'users.CustomerAddress', on_delete=models.SET_NULL, null=True, related_name='orders'
    )

    payment_status = models.CharField(max_length=20, choices=PAYMENT_STATUS_CHOICES, default=PAYMENT_PENDING)
    payment_method = models.CharField(max_length=50)
    verification_code = models.CharField(max_length=20, default=generate_verification_code)

    # Delivery
    delivery_man_name = models.CharField(max_length=100, blank=True, default='')
    delivery_man_contact = models.CharField(max_length=50, blank=True, default='')
    expected_delivery_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status']),
            models.Index(fields=['payment_status']),
            models.Index(fields=['customer']),
            models.Index(fields=['seller', 'created_at']),
        ]

    def __str__(self):
        return f"Order {self.order_id}"
