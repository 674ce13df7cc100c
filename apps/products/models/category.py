from django.db import models


class CatalogStatus(models.TextChoices):
    ACTIVE = 'Active', 'Active'
    INACTIVE = 'Inactive', 'Inactive'


class Category(models.Model):
    """Top level of the three-level taxonomy"""
    name = models.CharField(max_length=100, unique=True)
    priority = models.IntegerField(default=0, help_text="Display order; lower sorts first")
    logo = models.URLField(max_length=500, blank=True, default='', help_text="Logo URL in the image store")
    status = models.CharField(max_length=10, choices=CatalogStatus.choices, default=CatalogStatus.INACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        verbose_name_plural = 'Categories'
        indexes = [
            models.Index(fields=['status']),
            models.Index(fields=['priority']),
        ]

    def __str__(self):
        return self.name


class SubCategory(models.Model):
    name = models.CharField(max_length=100)
    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name='sub_categories')
    priority = models.IntegerField(default=0)
    status = models.CharField(max_length=10, choices=CatalogStatus.choices, default=CatalogStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sub_categories'
        verbose_name_plural = 'Sub categories'
        indexes = [
            models.Index(fields=['category', 'priority']),
        ]

    def __str__(self):
        return f"{self.category.name} / {self.name}"


class SubSubCategory(models.Model):
    name = models.CharField(max_length=100)
    sub_category = models.ForeignKey(SubCategory, on_delete=models.CASCADE, related_name='sub_sub_categories')
    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name='sub_sub_categories')
    priority = models.IntegerField(default=0)
    status = models.CharField(max_length=10, choices=CatalogStatus.choices, default=CatalogStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sub_sub_categories'
        verbose_name_plural = 'Sub sub categories'
        indexes = [
            models.Index(fields=['sub_category', 'priority']),
        ]

    def __str__(self):
        return self.name
