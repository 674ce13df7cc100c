from django.db import models


class Banner(models.Model):
    """Storefront banner; the image ratio is fixed per placement"""
    BANNER_RATIOS = {
        'Main Banner': '3:1',
        'Popup Banner': '1:1',
        'Main Section Banner': '4:1',
        'Footer Banner': '2:1',
    }
    TYPE_CHOICES = [(name, name) for name in BANNER_RATIOS]

    RESOURCE_TYPE_CHOICES = [
        ('Product', 'Product'),
        ('Category', 'Category'),
        ('Brand', 'Brand'),
        ('Shop', 'Shop'),
    ]

    banner_type = models.CharField(max_length=30, choices=TYPE_CHOICES)
    banner_url = models.CharField(max_length=500, help_text="Link the banner opens")
    resource_type = models.CharField(max_length=20, choices=RESOURCE_TYPE_CHOICES)
    product = models.ForeignKey(
        'products.Product', on_delete=models.SET_NULL, null=True, blank=True, related_name='banners'
    )
    banner_image_ratio = models.CharField(max_length=10)
    image_url = models.URLField(max_length=500, help_text="Banner image URL in the image store")
    is_published = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'banners'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['banner_type', 'is_published']),
        ]

    def __str__(self):
        return f"Banner {self.id}: {self.banner_type}"

    @classmethod
    def expected_ratio(cls, banner_type):
        return cls.BANNER_RATIOS.get(banner_type)
