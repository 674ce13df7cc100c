import random
import time
from decimal import Decimal

from django.db import models
from django.utils import timezone


def generate_refund_id():
    """``REF-<epoch milliseconds>-<1000..9999>``"""
    return f"REF-{int(time.time() * 1000)}-{random.randint(1000, 9999)}"


class Refund(models.Model):
    """
    Refund request for a delivered, paid order.

    ``products`` snapshots every order line at request time:
    productId, title, description, quantity, unitPrice, tax, itemDiscount, totalPrice.
    """
    STATUS_PENDING = 'Pending'
    STATUS_APPROVED = 'Approved'
    STATUS_REJECTED = 'Rejected'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    refund_id = models.CharField(max_length=40, unique=True, default=generate_refund_id)
    requested_date = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    payment_method = models.CharField(max_length=50)
    order = models.ForeignKey('Order', on_delete=models.CASCADE, related_name='refunds')
    products = models.JSONField(default=list)
    refundable_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0'))
    reason = models.JSONField(default=dict, help_text="description and image URLs")
    seller = models.ForeignKey('users.Seller', on_delete=models.CASCADE, related_name='refunds')
    customer_details = models.JSONField(default=dict, help_text="name, email, phone at request time")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'refunds'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'created_at']),
            models.Index(fields=['order']),
        ]

    def __str__(self):
        return f"Refund {self.refund_id}"

    @property
    def product_ids(self):
        return {item.get('productId') for item in self.products or []}


class RefundLog(models.Model):
    """Append-only history of refund status changes"""
    ACTOR_CUSTOMER = 'customer'
    ACTOR_ADMIN = 'admin'
    ACTOR_CHOICES = [
        (ACTOR_CUSTOMER, 'Customer'),
        (ACTOR_ADMIN, 'Admin'),
    ]

    refund = models.ForeignKey(Refund, on_delete=models.CASCADE, related_name='logs')
    actor_type = models.CharField(max_length=20, choices=ACTOR_CHOICES)
    actor_id = models.IntegerField(null=True, blank=True)
    actor_name = models.CharField(max_length=200, blank=True, default='')
    date = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=20, choices=Refund.STATUS_CHOICES)
    note = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'refund_logs'
        ordering = ['date', 'id']

    def __str__(self):
        return f"{self.refund_id} {self.status} by {self.actor_type}"

    def save(self, *args, **kwargs):
        if self.pk is not None:
            raise ValueError("Refund log entries cannot be modified")
        super().save(*args, **kwargs)
