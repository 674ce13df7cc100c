"""
Notification and device token serializers.
"""
from rest_framework import serializers
from ..models import DeviceToken, Notification


class DeviceTokenSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = DeviceToken
        fields = ['id', 'token', 'createdAt']
        read_only_fields = fields


class NotificationSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source='image_url', read_only=True)
    recipientTokens = serializers.ListField(source='recipient_tokens', read_only=True)
    notificationCount = serializers.IntegerField(source='notification_count', read_only=True)
    failureCount = serializers.IntegerField(source='failure_count', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Notification
        fields = [
            'id', 'title', 'description', 'imageUrl', 'recipientTokens',
            'notificationCount', 'failureCount', 'status', 'createdAt'
        ]
        read_only_fields = fields
