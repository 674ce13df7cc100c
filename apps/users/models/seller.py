from django.contrib.auth.hashers import make_password
from django.db import models


class Seller(models.Model):
    """Marketplace vendor; owns products and receives orders"""
    STATUS_PENDING = 'Pending'
    STATUS_APPROVED = 'Approved'
    STATUS_BLOCKED = 'Blocked'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_BLOCKED, 'Blocked'),
    ]

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, blank=True, default='')
    shop_name = models.CharField(max_length=200, help_text="Store name shown on orders")
    address = models.TextField(blank=True, default='')
    phone_number = models.CharField(max_length=20, unique=True)
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128, blank=True, default='', help_text="Hashed password")
    aadhaar_number = models.CharField(max_length=20, blank=True, default='')
    pan_number = models.CharField(max_length=20, blank=True, default='')
    image = models.URLField(max_length=500, blank=True, default='')
    other_documents = models.JSONField(default=list, blank=True, help_text="Document image URLs")
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sellers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['shop_name']),
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return f"{self.shop_name} ({self.full_name})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def set_password(self, raw_password):
        self.password = make_password(raw_password)
