"""
Customer review serializers.
"""
from rest_framework import serializers
from ..models import CustomerReview


class CustomerReviewSerializer(serializers.ModelSerializer):
    reviewId = serializers.CharField(source='review_id', read_only=True)
    productId = serializers.IntegerField(source='product_id', read_only=True)
    productTitle = serializers.CharField(source='product.title', read_only=True)
    customerId = serializers.IntegerField(source='customer_id', read_only=True)
    customerName = serializers.CharField(source='customer.full_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = CustomerReview
        fields = [
            'id', 'reviewId', 'productId', 'productTitle', 'customerId', 'customerName',
            'rating', 'review', 'reply', 'status', 'createdAt'
        ]
        read_only_fields = fields


class CustomerReviewCreateSerializer(serializers.Serializer):
    """Product and customer are resolved by the service so a miss answers 404"""
    productId = serializers.IntegerField()
    customerId = serializers.IntegerField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.BooleanField(required=False, default=False)


class CustomerReviewUpdateSerializer(serializers.ModelSerializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)

    class Meta:
        model = CustomerReview
        fields = ['rating', 'review', 'reply', 'status']
        extra_kwargs = {
            'review': {'required': False},
            'reply': {'required': False},
            'status': {'required': False},
        }


class ReviewStatusSerializer(serializers.Serializer):
    status = serializers.BooleanField()
