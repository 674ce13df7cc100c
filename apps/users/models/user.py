from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Back-office staff account; the actor recorded on admin-side changes"""
    phone = models.CharField(max_length=20, unique=True, null=True, blank=True)
    avatar = models.URLField(max_length=500, null=True, blank=True, help_text="Avatar URL stored in the image store")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username or self.phone or f"User {self.id}"

    @property
    def display_name(self):
        full_name = self.get_full_name()
        return full_name or self.username
