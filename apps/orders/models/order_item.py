from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class OrderItem(models.Model):
    """Order line; ``total_price`` is stored as submitted"""

    order = models.ForeignKey('Order', on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(
        'products.Product', on_delete=models.SET_NULL, null=True, related_name='order_items'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, help_text="Price at the time of purchase")
    tax = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    item_discount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    total_price = models.DecimalField(max_digits=14, decimal_places=2)

    class Meta:
        db_table = 'order_items'
        ordering = ['id']
        indexes = [
            models.Index(fields=['order']),
            models.Index(fields=['product']),
        ]

    def __str__(self):
        return f"OrderItem {self.order_id}:{self.product_id} x{self.quantity}"
