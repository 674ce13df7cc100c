from django.db import models

from .category import CatalogStatus


class Brand(models.Model):
    name = models.CharField(max_length=100, unique=True)
    logo = models.URLField(max_length=500, help_text="Logo URL in the image store")
    total_products = models.IntegerField(default=0)
    total_orders = models.IntegerField(default=0)
    status = models.CharField(max_length=10, choices=CatalogStatus.choices, default=CatalogStatus.INACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'brands'
        indexes = [
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return self.name
