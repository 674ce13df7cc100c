from django.db import models
from django.utils import timezone


class Customer(models.Model):
    """Storefront customer account"""
    BLOCK = 'Block'
    UNBLOCK = 'Unblock'
    BLOCK_CHOICES = [
        (BLOCK, 'Block'),
        (UNBLOCK, 'Unblock'),
    ]

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, blank=True, default='')
    phone_number = models.CharField(max_length=20, unique=True)
    email = models.EmailField(unique=True, null=True, blank=True)
    joined_date = models.DateTimeField(default=timezone.now)
    is_block = models.CharField(max_length=10, choices=BLOCK_CHOICES, default=UNBLOCK)
    customer_logo = models.URLField(max_length=500, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['phone_number']),
            models.Index(fields=['first_name', 'last_name']),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.phone_number})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_blocked(self):
        return self.is_block == self.BLOCK
