"""
Flash deal serializers.
"""
from rest_framework import serializers

from apps.products.serializers import ProductSummarySerializer
from apps.users.serializers import SellerSummarySerializer
from ..models import FlashDeal


class FlashDealProductSerializer(ProductSummarySerializer):
    seller = SellerSummarySerializer(read_only=True)

    class Meta(ProductSummarySerializer.Meta):
        fields = ProductSummarySerializer.Meta.fields + ['seller']
        read_only_fields = fields


class FlashDealSerializer(serializers.ModelSerializer):
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)
    bannerImage = serializers.CharField(source='banner_image', read_only=True)
    activeProducts = serializers.IntegerField(source='active_products', read_only=True)
    isPublished = serializers.BooleanField(source='is_published', read_only=True)
    products = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = FlashDeal
        fields = [
            'id', 'title', 'startDate', 'endDate', 'bannerImage', 'status',
            'activeProducts', 'isPublished', 'products', 'createdAt'
        ]
        read_only_fields = fields


class FlashDealDetailSerializer(FlashDealSerializer):
    """Flash deal with its products and their sellers expanded"""
    products = FlashDealProductSerializer(many=True, read_only=True)


class FlashDealProductsSerializer(serializers.Serializer):
    productIds = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)


class FlashDealPublishSerializer(serializers.Serializer):
    isPublished = serializers.BooleanField(required=False)
