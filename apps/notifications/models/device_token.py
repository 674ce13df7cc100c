from django.db import models


class DeviceToken(models.Model):
    """Push registration token of a client device"""
    token = models.CharField(max_length=512, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'device_tokens'
        ordering = ['-created_at']

    def __str__(self):
        return self.token[:32]
