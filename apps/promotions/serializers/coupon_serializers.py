"""
Coupon serializers.
"""
from rest_framework import serializers

from apps.products.models import Product, Category
from apps.products.serializers import ProductSummarySerializer
from apps.users.models import Customer
from ..models import Coupon


class CouponCustomerSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='full_name', read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'name', 'email']
        read_only_fields = fields


class CouponSerializer(serializers.ModelSerializer):
    couponType = serializers.CharField(source='coupon_type', read_only=True)
    creatorType = serializers.CharField(source='creator_type', read_only=True)
    creatorId = serializers.IntegerField(source='creator_id', read_only=True)
    applicableProducts = ProductSummarySerializer(source='applicable_products', many=True, read_only=True)
    applyToAllProducts = serializers.BooleanField(source='apply_to_all_products', read_only=True)
    specificCustomers = CouponCustomerSerializer(source='specific_customers', many=True, read_only=True)
    limitPerUser = serializers.IntegerField(source='limit_per_user', read_only=True)
    discountType = serializers.CharField(source='discount_type', read_only=True)
    discountAmount = serializers.DecimalField(
        source='discount_amount', max_digits=12, decimal_places=2, read_only=True
    )
    minPurchase = serializers.DecimalField(source='min_purchase', max_digits=12, decimal_places=2, read_only=True)
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    expireDate = serializers.DateTimeField(source='expire_date', read_only=True)
    applyToAllCategories = serializers.BooleanField(source='apply_to_all_categories', read_only=True)
    categoryId = serializers.IntegerField(source='category_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Coupon
        fields = [
            'id', 'couponType', 'title', 'code', 'creatorType', 'creatorId',
            'applicableProducts', 'applyToAllProducts', 'customer', 'specificCustomers',
            'limitPerUser', 'discountType', 'discountAmount', 'minPurchase',
            'startDate', 'expireDate', 'applyToAllCategories', 'categoryId',
            'status', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class CouponUpdateSerializer(serializers.ModelSerializer):
    """
    Edit a coupon. Only the listed fields are writable; anything omitted keeps
    its stored value.
    """
    couponType = serializers.ChoiceField(source='coupon_type', choices=Coupon.COUPON_TYPE_CHOICES, required=False)
    title = serializers.CharField(min_length=3, max_length=200, required=False)
    code = serializers.CharField(min_length=6, max_length=50, required=False)
    creatorType = serializers.ChoiceField(source='creator_type', choices=Coupon.CREATOR_TYPE_CHOICES, required=False)
    creatorId = serializers.IntegerField(source='creator_id', min_value=1, required=False)
    applicableProducts = serializers.PrimaryKeyRelatedField(
        source='applicable_products', many=True, queryset=Product.objects.all(), required=False
    )
    applyToAllProducts = serializers.BooleanField(source='apply_to_all_products', required=False)
    customer = serializers.ChoiceField(choices=Coupon.CUSTOMER_CHOICES, required=False)
    specificCustomers = serializers.PrimaryKeyRelatedField(
        source='specific_customers', many=True, queryset=Customer.objects.all(), required=False
    )
    limitPerUser = serializers.IntegerField(source='limit_per_user', min_value=1, required=False)
    discountType = serializers.ChoiceField(
        source='discount_type', choices=Coupon.DISCOUNT_TYPE_CHOICES, required=False
    )
    discountAmount = serializers.DecimalField(
        source='discount_amount', max_digits=12, decimal_places=2, min_value=1, required=False
    )
    minPurchase = serializers.DecimalField(
        source='min_purchase', max_digits=12, decimal_places=2, min_value=0, required=False
    )
    startDate = serializers.DateTimeField(source='start_date', required=False)
    expireDate = serializers.DateTimeField(source='expire_date', required=False)
    applyToAllCategories = serializers.BooleanField(source='apply_to_all_categories', required=False)
    categoryId = serializers.PrimaryKeyRelatedField(
        source='category', queryset=Category.objects.all(), allow_null=True, required=False
    )
    status = serializers.BooleanField(required=False)

    class Meta:
        model = Coupon
        fields = [
            'couponType', 'title', 'code', 'creatorType', 'creatorId',
            'applicableProducts', 'applyToAllProducts', 'customer', 'specificCustomers',
            'limitPerUser', 'discountType', 'discountAmount', 'minPurchase',
            'startDate', 'expireDate', 'applyToAllCategories', 'categoryId', 'status'
        ]

    def validate_code(self, value):
        queryset = Coupon.objects.filter(code=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('Coupon code already exists')
        return value

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        expire = attrs.get('expire_date', getattr(self.instance, 'expire_date', None))
        if start and expire and expire <= start:
            raise serializers.ValidationError({'expireDate': 'Expiration date must be after the start date'})
        return attrs


class CouponStatusSerializer(serializers.Serializer):
    status = serializers.BooleanField()
