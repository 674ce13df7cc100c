from django.contrib import admin
from .models import DeviceToken, Notification


@admin.register(DeviceToken)
class DeviceTokenAdmin(admin.ModelAdmin):
    list_display = ['token', 'created_at']
    search_fields = ['token']


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ['title', 'notification_count', 'failure_count', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['title', 'description']
    readonly_fields = ['recipient_tokens', 'notification_count', 'failure_count', 'created_at', 'updated_at']
