from django.db import models


class Notification(models.Model):
    STATUS_SENT = 'Sent'
    STATUS_FAILED = 'Failed'
    STATUS_CHOICES = [
        (STATUS_SENT, 'Sent'),
        (STATUS_FAILED, 'Failed'),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField()
    image_url = models.URLField(max_length=500, blank=True, default='')
    recipient_tokens = models.JSONField(default=list)
    notification_count = models.IntegerField(default=0, help_text="Successful deliveries across all sends")
    failure_count = models.IntegerField(default=0)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_SENT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at']

    def __str__(self):
        return self.title
