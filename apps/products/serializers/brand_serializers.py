"""
Brand serializers.
"""
from rest_framework import serializers
from ..models import Brand
from .category_serializers import STATUS_CHOICES


class BrandSerializer(serializers.ModelSerializer):
    totalProducts = serializers.IntegerField(source='total_products', read_only=True)
    totalOrders = serializers.IntegerField(source='total_orders', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Brand
        fields = ['id', 'name', 'logo', 'totalProducts', 'totalOrders', 'status', 'createdAt']
        read_only_fields = fields


class BrandWriteSerializer(serializers.ModelSerializer):
    """Allow-listed brand fields; the logo arrives as an upload"""
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)

    class Meta:
        model = Brand
        fields = ['name', 'status']
