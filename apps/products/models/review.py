import random

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models


def generate_review_id():
    return str(random.randint(10000, 99999))


class CustomerReview(models.Model):
    review_id = models.CharField(max_length=5, unique=True, default=generate_review_id)
    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='reviews')
    customer = models.ForeignKey('users.Customer', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review = models.TextField(blank=True, default='')
    reply = models.TextField(blank=True, default='')
    status = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customer_reviews'
        ordering = ['-created_at']

    def __str__(self):
        return f"Review {self.review_id} ({self.rating}/5)"
