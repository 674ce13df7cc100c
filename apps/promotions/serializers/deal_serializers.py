"""
Deal of the day serializers.
"""
from rest_framework import serializers

from apps.products.models import Product
from apps.products.serializers import ProductSummarySerializer
from ..models import DealOfTheDay


class DealOfTheDaySerializer(serializers.ModelSerializer):
    product = ProductSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = DealOfTheDay
        fields = ['id', 'title', 'product', 'status', 'createdAt']
        read_only_fields = fields


class DealOfTheDayWriteSerializer(serializers.ModelSerializer):
    product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        error_messages={
            'does_not_exist': 'Invalid product ID',
            'incorrect_type': 'Invalid product ID',
        }
    )
    status = serializers.ChoiceField(choices=DealOfTheDay.STATUS_CHOICES, required=False)

    class Meta:
        model = DealOfTheDay
        fields = ['title', 'product', 'status']


class DealStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=DealOfTheDay.STATUS_CHOICES)
