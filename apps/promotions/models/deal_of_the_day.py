from django.db import models


class DealOfTheDay(models.Model):
    STATUS_ACTIVE = 'Active'
    STATUS_EXPIRED = 'Expired'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_EXPIRED, 'Expired'),
    ]

    title = models.CharField(max_length=200)
    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='deals_of_the_day')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'deals_of_the_day'
        ordering = ['-created_at']
        verbose_name_plural = 'deals of the day'

    def __str__(self):
        return self.title
