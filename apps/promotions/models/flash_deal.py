from django.db import models
from django.utils import timezone


class FlashDeal(models.Model):
    STATUS_ACTIVE = 'Active'
    STATUS_EXPIRED = 'Expired'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_EXPIRED, 'Expired'),
    ]

    title = models.CharField(max_length=200)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    banner_image = models.URLField(max_length=500)
    banner_public_id = models.CharField(max_length=255, blank=True, default='')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    active_products = models.IntegerField(default=0)
    is_published = models.BooleanField(default=False)
    products = models.ManyToManyField('products.Product', blank=True, related_name='flash_deals')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'flash_deals'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def refresh_status(self, now=None):
        """Recompute Active/Expired from ``end_date``; the caller saves"""
        now = now or timezone.now()
        self.status = self.STATUS_EXPIRED if now > self.end_date else self.STATUS_ACTIVE
        return self.status

    def add_products(self, product_ids):
        self.products.add(*product_ids)
        self.active_products = self.products.count()
        self.save(update_fields=['active_products', 'updated_at'])

    def remove_product(self, product_id):
        self.products.remove(product_id)
        self.active_products = self.products.count()
        self.save(update_fields=['active_products', 'updated_at'])
