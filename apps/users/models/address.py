from django.db import models


class CustomerAddress(models.Model):
    """Billing and shipping address pair for a customer"""
    ADDRESS_TYPE_CHOICES = [
        ('Permanent', 'Permanent'),
        ('Temporary', 'Temporary'),
    ]

    customer = models.ForeignKey('users.Customer', on_delete=models.CASCADE, related_name='addresses')
    billing_address = models.JSONField(
        default=dict,
        help_text="contactPersonName, phone, addressType, country, city, zipCode, address, note"
    )
    shipping_address = models.JSONField(
        default=dict,
        help_text="contactPersonName, phone, addressType, country, city, zipCode, address, note"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customer_addresses'
        verbose_name = 'Customer address'
        verbose_name_plural = 'Customer addresses'
        ordering = ['-created_at']

    def __str__(self):
        shipping = self.shipping_address or {}
        return f"{shipping.get('contactPersonName', '')} - {shipping.get('city', '')}"
